"""Usage renderer for incomplete command lines."""

from .matcher import MatchResult
from .tree import GrammarTree


class UsageRenderer:
    """Renders the matched part of a line and its valid continuations."""

    PLACEHOLDER = "cmd"

    def render(self, grammar: GrammarTree, result: MatchResult) -> str:
        """
        Render usage help for a partial match.

        The matched words are listed first, followed by a placeholder
        and one bullet per child of the final node, with its help text
        when it has one.

        Args:
            grammar: The grammar the line was matched against.
            result: The match result.

        Returns:
            Formatted usage string.
        """
        matched = " ".join(result.matched_names)
        options = [grammar.get(child) for child in grammar.children(result.final_node)]

        if not options:
            usage = f"Usage: {matched}" if matched else "Usage:"
            return f"{usage}\n(no further commands)"

        prefix = f"{matched} " if matched else ""
        lines = [
            f"Usage: {prefix}<{self.PLACEHOLDER}>",
            f"Where '{self.PLACEHOLDER}' can be either of",
        ]
        for node in options:
            line = f"\t* {node.name}"
            if node.explanation:
                line += f": {node.explanation}"
            lines.append(line)

        return "\n".join(lines)
