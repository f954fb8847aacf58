# pinentry-op A pinentry that reads passphrases from 1Password
# Copyright (C) 2014 Richard Mitchell
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

"""Recognition of pinentry request lines.

A request line has the shape ``COMMAND[ ARGUMENT-REST]``. The command
keyword is matched case-insensitively, one character at a time, by an
automaton whose states are the prefixes of the known keywords. A keyword
is only accepted when it is followed by a space or by the end of the
line, so ``BYEX`` is not ``BYE``. Everything after the separating space
is handed to the command untouched.
"""


class Commands:

    Bye = 'BYE'
    GetInfo = 'GETINFO'
    GetPin = 'GETPIN'
    Help = 'HELP'
    Option = 'OPTION'
    Reset = 'RESET'

    all = (Bye, GetInfo, GetPin, Help, Option, Reset)


SEPARATOR = ' '
INITIAL = ''


def _make_transitions(keywords):
    transitions = {}
    for keyword in keywords:
        for i, char in enumerate(keyword):
            transitions[(keyword[:i], char)] = keyword[:i + 1]
    return transitions


# (state, uppercase character) -> next state
TRANSITIONS = _make_transitions(Commands.all)
ACCEPTING = frozenset(Commands.all)


def ascii_upper(char):
    if 'a' <= char <= 'z':
        return chr(ord(char) - 32)
    return char


def recognize(line):
    """Classify ``line``.

    Returns ``(command, rest)`` where ``command`` is one of
    :class:`Commands` and ``rest`` is everything after the separating
    space, or ``(None, line)`` when no command matches.
    """
    state = INITIAL
    length = len(line)
    for index in range(length + 1):
        # The end of the line counts as a separator.
        if index < length:
            char = ascii_upper(line[index])
        else:
            char = SEPARATOR
        if char == SEPARATOR and state in ACCEPTING:
            return state, line[index + 1:]
        state = TRANSITIONS.get((state, char))
        if state is None:
            break
    return None, line


def equals_ignore_case(text, keyword):
    """Compare ``text`` with ``keyword`` ignoring ASCII case only."""
    if len(text) != len(keyword):
        return False
    for a, b in zip(text, keyword):
        if ascii_upper(a) != ascii_upper(b):
            return False
    return True
