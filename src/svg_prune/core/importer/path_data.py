"""Parse the `d` attribute of paths."""

import re

from svg_prune.models.values import PathData, PathSegment

# Number of arguments taken by each command.
_ARITY = {"m": 2, "z": 0, "l": 2, "h": 1, "v": 1, "c": 6, "s": 4, "q": 4, "t": 2, "a": 7}

# Positions of the large-arc and sweep flags among the seven arc arguments.
_ARC_FLAGS = (3, 4)

_COMMAND_RE = re.compile(r"([MmZzLlHhVvCcSsQqTtAa])([^MmZzLlHhVvCcSsQqTtAa]*)")
_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_FLAG_RE = re.compile(r"[01]")
_SEPARATOR_RE = re.compile(r"[ \t\r\n,]*")
_SEPARATORS = " \t\r\n,"


def _scan_arguments(command: str, rest: str) -> list[float] | None:
    """Read the arguments following a command, or None if junk is mixed in.

    Arc flags are a single digit each, so `0 105 5` reads as `0 1 0 5 5`.
    """
    numbers: list[float] = []
    is_arc = command in "Aa"
    pos = _SEPARATOR_RE.match(rest).end()
    while pos < len(rest):
        if is_arc and len(numbers) % 7 in _ARC_FLAGS:
            match = _FLAG_RE.match(rest, pos)
        else:
            match = _NUMBER_RE.match(rest, pos)
        if match is None:
            return None
        numbers.append(float(match.group()))
        pos = _SEPARATOR_RE.match(rest, match.end()).end()
    return numbers


def parse_path_data(text: str) -> PathData:
    """Parse path data, keeping everything up to the first error.

    This follows the SVG error-handling rule: a path renders up to the first
    malformed segment. Data that does not start with a moveto is empty.
    """
    segments: list[PathSegment] = []

    matches = list(_COMMAND_RE.finditer(text))
    if not matches or text[: matches[0].start()].strip(_SEPARATORS):
        return PathData()

    for match in matches:
        command, rest = match.group(1), match.group(2)
        if not segments and command not in "Mm":
            break
        numbers = _scan_arguments(command, rest)
        if numbers is None:
            break

        arity = _ARITY[command.lower()]
        if arity == 0:
            if numbers:
                break
            segments.append(PathSegment(command))
            continue
        if not numbers:
            break

        complete = len(numbers) - len(numbers) % arity
        for i in range(0, complete, arity):
            # Extra coordinate pairs after a moveto are implicit linetos.
            name = command
            if i > 0 and command in "Mm":
                name = "L" if command == "M" else "l"
            segments.append(PathSegment(name, tuple(numbers[i : i + arity])))
        if complete != len(numbers):
            break

    return PathData(tuple(segments))
