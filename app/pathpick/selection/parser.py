"""Text syntax for selection modes.

Config files and command-line options describe modes as short text:

    dir              directories
    file             any regular file
    file:rs, *.rs    regular files with extension "rs"
    file:md,dir      comma-separated terms combine into a MultipleMode
    none             matches nothing
"""

from pathpick.selection.models import DirectoryMode, FileMode, MultipleMode, SelectionMode

_DIRECTORY_TERMS = frozenset({"dir", "directory"})
_NONE_TERMS = frozenset({"", "none"})


class SelectionModeError(ValueError):
    """Raised when selection mode text cannot be parsed."""


def parse_selection_mode(text: str) -> SelectionMode:
    """Parse selection mode text into a SelectionMode.

    Args:
        text: Mode description, e.g. "dir", "file:rs" or "file:md,dir".

    Returns:
        The parsed mode. A single term yields that term's mode; several
        terms yield a MultipleMode in the given order.

    Raises:
        SelectionModeError: If a term is not recognized.
    """
    stripped = text.strip()
    if stripped.lower() in _NONE_TERMS:
        return MultipleMode(())

    terms = [term.strip() for term in stripped.split(",")]
    modes = tuple(_parse_term(term) for term in terms)
    if len(modes) == 1:
        return modes[0]
    return MultipleMode(modes)


def _parse_term(term: str) -> SelectionMode:
    lowered = term.lower()
    if lowered in _DIRECTORY_TERMS:
        return DirectoryMode()
    if lowered == "file":
        return FileMode()
    if lowered.startswith("file:"):
        return _file_mode(term, term[len("file:") :])
    if term.startswith("*."):
        return _file_mode(term, term[2:])
    msg = f"Unknown selection mode term: {term!r}"
    raise SelectionModeError(msg)


def _file_mode(term: str, extension: str) -> FileMode:
    extension = extension.strip()
    if not extension.lstrip("."):
        msg = f"Missing extension in selection mode term: {term!r}"
        raise SelectionModeError(msg)
    return FileMode(extension)


def format_selection_mode(mode: SelectionMode) -> str:
    """Render a SelectionMode back to its text form.

    Nested MultipleMode members are flattened, since OR is associative.

    Args:
        mode: Mode to render.

    Returns:
        Text accepted by parse_selection_mode.
    """
    terms = _terms(mode)
    if not terms:
        return "none"
    return ",".join(terms)


def _terms(mode: SelectionMode) -> list[str]:
    match mode:
        case DirectoryMode():
            return ["dir"]
        case FileMode(extension=None):
            return ["file"]
        case FileMode(extension=extension):
            return [f"file:{extension}"]
        case MultipleMode(modes=modes):
            return [term for submode in modes for term in _terms(submode)]
        case _:
            msg = f"Not a selection mode: {mode!r}"
            raise SelectionModeError(msg)
