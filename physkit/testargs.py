"""Parsing of test command-line arguments and test device selection."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable, Mapping, NamedTuple

from .strings import split, starts_with, upper_case


class _Token(NamedTuple):
    text: str
    is_key: bool


def _is_key(s: str) -> bool:
    return starts_with(s, "-")


def _get_key(s: str) -> str:
    return s[2:] if starts_with(s, "--") else s[1:]


@dataclass
class TestSession:
    """Options given to a test run.

    flags holds '-f'/'--flag' options, vec_params maps '--p v1 v2 ...' to its
    values, and params repeats every vec_params entry with exactly one value.
    """

    __test__ = False

    flags: dict[str, bool] = field(default_factory=dict)
    params: dict[str, str] = field(default_factory=dict)
    vec_params: dict[str, list[str]] = field(default_factory=dict)

    def parse_test_args(self, args: Iterable[str]) -> None:
        """Parse arguments such as '-b', '--p=foo', '--p foo bar', '--p=a,b'."""
        args = list(args)
        if not args:
            return

        tokens: list[_Token] = []
        for arg in args:
            pieces = split(arg, "=")
            if len(pieces) > 2:
                raise ValueError(
                    f"Error! Badly formatted arg: '{arg}'\n"
                    " Cannot contain two '=' chars in a single arg.\n"
                )
            if len(pieces) > 1:
                if not _is_key(pieces[0]):
                    raise ValueError(
                        f"Error! Badly formatted arg: '{arg}'\n"
                        " When using a=b syntax, 'a' must be a key (i.e., start with - or --)\n"
                    )
                tokens.append(_Token(_get_key(pieces[0]), True))
                for value in split(pieces[-1], ","):
                    if _is_key(value):
                        raise ValueError(
                            f"Error! Badly formatted arg: '{arg}'\n"
                            " When using --key=val1,val2 format, val1/val2 cannot be keys.\n"
                        )
                    tokens.append(_Token(value, False))
                continue

            pieces = split(arg, ",")
            if len(pieces) > 1:
                for value in pieces:
                    if _is_key(value):
                        raise ValueError(
                            f"Error! Badly formatted arg: '{arg}'\n"
                            " When using val1,val2 format, val1/val2 cannot be keys.\n"
                        )
                    tokens.append(_Token(value, False))
            elif _is_key(arg):
                tokens.append(_Token(_get_key(arg), True))
            else:
                tokens.append(_Token(arg, False))

        if not tokens[0].is_key:
            raise ValueError(
                "Error! Badly formatted --args. The first string should be of the form -f/--flag.\n"
                f" - first args: '{args[0]}'\n"
            )

        key = tokens[0].text
        values_for_key = 0
        for token in tokens[1:]:
            if token.is_key:
                if values_for_key == 0:
                    self.flags[key] = True
                key = token.text
                values_for_key = 0
                continue
            self.vec_params.setdefault(key, []).append(token.text)
            values_for_key += 1

        if values_for_key == 0:
            self.flags[key] = True

        for name, values in self.vec_params.items():
            if len(values) == 1:
                self.params[name] = values[0]


def argv_matches(s: str, short_opt: str, long_opt: str) -> bool:
    """True if s is the short or long option, or the short one with an extra '-'."""
    return s in (short_opt, long_opt, "-" + short_opt)


def get_test_device(mpi_rank: int, environ: Mapping[str, str] | None = None) -> int:
    """Pick the device id for this rank from CTest resource-group variables.

    Returns -1 when no resource groups are set, leaving the choice to the runtime.
    """
    env = os.environ if environ is None else environ
    count_str = env.get("CTEST_RESOURCE_GROUP_COUNT")
    if count_str is None:
        return -1

    group_count = int(count_str.strip())
    if group_count <= 0:
        raise ValueError(f"Error! Invalid CTEST_RESOURCE_GROUP_COUNT: '{count_str}'\n")
    my_group = mpi_rank % group_count

    key = f"CTEST_RESOURCE_GROUP_{my_group}"
    res_type = env.get(key)
    if res_type is None:
        raise LookupError(
            f"Error! Missing '{key}' env var.\n"
            f"       CTEST_RESOURCE_COUNT: {group_count}\n"
            f"       Res group id for this rank: {my_group}\n"
        )

    key += "_" + upper_case(res_type)
    res = env.get(key)
    if res is None:
        raise LookupError(
            f"Error! Missing '{key}' env var.\n"
            f"       CTEST_RESOURCE_COUNT: {group_count}\n"
            f"       Res group id for this rank: {my_group}\n"
            f"       Res group type for this rank: {res_type}\n"
        )

    if ";" in res:
        raise ValueError(f"Error! Multiple resources specified for group {my_group}\n")

    bad_spec = f"Error! Something seems wrong with resource spec '{res}'\n"
    id_and_slots = split(res, ",")
    if len(id_and_slots) != 2:
        raise ValueError(bad_spec)
    slots = split(id_and_slots[1], ":")
    if len(slots) != 2 or slots[0] != "slots" or slots[1] != "1":
        raise ValueError(bad_spec)
    dev = split(id_and_slots[0], ":")
    if len(dev) != 2 or dev[0] != "id":
        raise ValueError(bad_spec)
    return int(dev[1])