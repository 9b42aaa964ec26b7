"""Tab completion of grammar commands for prompt_toolkit."""

from typing import Callable

from prompt_toolkit.completion import Completer, Completion

from ..core import CommandParser, Depth, GrammarTree, NavigationController, NodeId, SequenceMatcher, tokenize


class GrammarCompleter(Completer):
    """Completes the next command word from the grammar.

    Command lines complete against the children of the node reached by
    the words typed so far. ``cd`` arguments complete path segments
    from the grammar root.
    """

    def __init__(self, grammar: GrammarTree, current_root: Callable[[], NodeId]):
        """
        Initialize the completer.

        Args:
            grammar: The grammar to complete from.
            current_root: Returns the session's current root when called.
        """
        self.grammar = grammar
        self.current_root = current_root
        self.matcher = SequenceMatcher(grammar)

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor
        words = text.split()

        if words and words[0] == CommandParser.CHANGE_ROOT_KEYWORD and (len(words) > 1 or text.endswith(" ")):
            argument = text.lstrip()[len(CommandParser.CHANGE_ROOT_KEYWORD):].lstrip()
            if " " not in argument:
                yield from self._complete_path(argument)
            return

        if not words or text.endswith(" "):
            prefix, word = words, ""
        else:
            prefix, word = words[:-1], words[-1]

        yield from self._complete_children(self.current_root(), tokenize(prefix), word)

    def _complete_path(self, argument: str):
        separator = NavigationController.PATH_SEPARATOR
        head, _, word = argument.rpartition(separator)
        segments = [s for s in head.split(separator) if s]
        for completion in self._complete_children(self.grammar.root, tokenize(segments), word):
            yield Completion(
                completion.text + separator,
                start_position=completion.start_position,
                display=completion.text,
                display_meta=completion.display_meta,
            )

    def _complete_children(self, start: NodeId, tokens, word: str):
        result = self.matcher.match(start, tokens)
        # Nothing to offer past a word the grammar doesn't know
        if result.matched_count != result.token_count:
            return

        # Only offer words the matcher would accept at the next position
        depth = Depth.at(len(tokens) + 1)
        for child in self.grammar.children(result.final_node):
            node = self.grammar.get(child)
            if node.name.startswith(word) and node.depth == depth:
                yield Completion(
                    node.name,
                    start_position=-len(word),
                    display_meta=node.explanation or "",
                )
