"""GrammarShell - Main orchestrator for the grammar shell."""

import logging

from .interfaces import Console
from .core import (
    CommandParser,
    ExitCommand,
    EmptyCommand,
    ChangeRootCommand,
    SequenceCommand,
    GrammarTree,
    NavigationController,
    SequenceMatcher,
    Session,
    UsageRenderer,
    tokenize,
)
from .config import Config

logger = logging.getLogger(__name__)


class GrammarShell:
    """Main shell orchestrating all components.

    Reads lines from the console, validates them against the grammar or
    navigates through it, and writes the outcome back.
    """

    ACCEPTED = "ACCEPTED"
    USAGE = "USAGE"

    def __init__(
        self,
        grammar: GrammarTree,
        console: Console,
        config: Config | None = None,
    ):
        """
        Initialize the shell.

        Args:
            grammar: The command grammar (read-only).
            console: Console to read lines from and write results to.
            config: Shell configuration (uses defaults if None).
        """
        self.grammar = grammar
        self.console = console
        self.config = config or Config()

        # Initialize components
        self.parser = CommandParser()
        self.matcher = SequenceMatcher(grammar)
        self.navigator = NavigationController(grammar, self.matcher)
        self.renderer = UsageRenderer()
        self.session = Session(current_root=grammar.root)

    @property
    def prompt(self) -> str:
        """Full prompt: navigation path followed by the prompt literal."""
        return f"{self.navigator.prompt_path(self.session)}{self.config.prompt}"

    def run(self) -> None:
        """Read and handle lines until the operator leaves or input ends."""
        logger.info("Shell started")

        while True:
            try:
                line = self.console.read_line(self.prompt)
            except KeyboardInterrupt:
                # Abandon the current line
                continue
            except EOFError:
                break
            except OSError as e:
                logger.warning(f"Input failed: {e}")
                break

            if not self.handle_line(line):
                break

        logger.info("Shell stopped")

    def handle_line(self, line: str) -> bool:
        """
        Handle one input line.

        Args:
            line: The line as typed.

        Returns:
            False when the session should end, True otherwise.
        """
        logger.debug(f"Received: {line!r}")

        command = self.parser.parse(line)
        logger.debug(f"Command: {command.__class__.__name__}")

        if isinstance(command, ExitCommand):
            return False

        response, self.session = self._process_command(command, self.session)

        if response is not None:
            self.console.write(response)

        return True

    def _process_command(
        self, command, session: Session
    ) -> tuple[str | None, Session]:
        """
        Process a command and return response with updated session.

        Args:
            command: The parsed command.
            session: The current session state.

        Returns:
            Tuple of (response_text or None, updated_session).
        """
        if isinstance(command, EmptyCommand):
            return None, session

        if isinstance(command, ChangeRootCommand):
            new_session = self.navigator.change_root(session, command.argument)
            logger.debug(
                f"Root: {self.grammar.get(session.current_root).name!r} -> "
                f"{self.grammar.get(new_session.current_root).name!r}"
            )
            return None, new_session

        if isinstance(command, SequenceCommand):
            return self.validate(command.words, session), session

        return None, session

    def validate(self, words: tuple[str, ...] | list[str], session: Session | None = None) -> str:
        """
        Validate command words from the session's current root.

        Each word is expected at its 1-based position in the line, so
        below the grammar root the first word can no longer match a child.

        Returns:
            ``ACCEPTED``, or ``USAGE`` followed by the rendered usage.
        """
        session = session or self.session

        result = self.matcher.match(session.current_root, tokenize(words))
        logger.debug(f"Matched {result.matched_count}/{result.token_count}, {result.remaining} below final node")

        if result.accepted:
            return self.ACCEPTED

        return f"{self.USAGE}\n{self.renderer.render(self.grammar, result)}"
