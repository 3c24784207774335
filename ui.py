from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.tree import Tree
from values import ByteString, Integer, List, Dict
from utils import as_text

console = Console()

# Longer strings are cut when rendered (piece hashes get huge)
MAX_PREVIEW = 60


def _leaf(value):
    if isinstance(value, Integer):
        return Text(str(value.value), style="bold magenta")

    preview = value.value
    if len(preview) > MAX_PREVIEW:
        preview = preview[:MAX_PREVIEW] + "…"
    label = Text(repr(preview), style="green")
    label.append(f" ({len(value.value)})", style="dim")
    return label


def _label(value, prefix=None):
    if isinstance(value, (ByteString, Integer)):
        label = _leaf(value)
    else:
        label = Text(f"{value.kind} [{len(value)}]", style="bold cyan")

    if prefix is not None:
        key = Text(f"{prefix}: ", style="yellow")
        key.append_text(label)
        return key
    return label


def render(value, title="value"):
    """Builds a rich Tree for a decoded value."""
    root = Tree(Text(title, style="bold white"))
    # (parent node, key or None, value) still to be drawn
    pending = [(root, None, value)]

    while pending:
        parent, key, node = pending.pop()
        branch = parent.add(_label(node, key))
        if isinstance(node, List):
            children = [(branch, None, item) for item in node]
        elif isinstance(node, Dict):
            children = [(branch, k, v) for k, v in node.entries.items()]
        else:
            continue
        pending.extend(reversed(children))

    return root


class FluxUI:
    def __init__(self):
        self.console = console

    def show(self, value, title="Decoded"):
        """Prints a decoded value as a tree inside a panel."""
        self.console.print(Panel(render(value, title), title=title, border_style="blue"))

    def print_error(self, error, source=None):
        """Prints a styled DecodeError, pointing at the offending offset when the input is known."""
        line = Text(error.kind.value, style="bold red")
        line.append(f": {error}")
        self.console.print(line)
        if source is None:
            return

        start = max(error.offset - 20, 0)
        snippet = as_text(source)[start : error.offset + 20]
        caret = " " * (error.offset - start) + "^"
        self.console.print(Text(snippet, style="white", no_wrap=True))
        self.console.print(Text(caret, style="bold red"))


ui = FluxUI()
