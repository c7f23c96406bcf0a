"""
Blocking prompt-and-retry loops, one per registration field.

A loop only returns once the parser accepts the input; rejected input is
answered with the field's fixed message and the prompt is shown again.
"""
from __future__ import annotations

import logging
from typing import Callable, TypeVar

from tigerclub.console import Console
from tigerclub.validators import (
    COUNT_ERROR,
    JERSEY_ERROR,
    NAME_ERROR,
    TYPE_ERROR,
    parse_jersey_choice,
    parse_name,
    parse_player_count,
    parse_registration_type,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

COUNT_PROMPT  = "Enter the number of players (1-4): "
NAME_PROMPT   = "Enter player name: "
TYPE_PROMPT   = "Registration type (Kids/Adult): "
JERSEY_PROMPT = "Do you want a jersey? (yes/no): "


def prompt_until_valid(
    console: Console,
    prompt: str,
    parse: Callable[[str], T],
    error_message: str,
) -> T:
    """
    Ask ``prompt`` until ``parse`` accepts the answer.

    ``parse`` signals bad input by raising ValueError. Anything else,
    including a closed input stream, propagates to the caller.
    """
    while True:
        raw = console.read_line(prompt)
        try:
            return parse(raw)
        except ValueError:
            logger.debug("Rejected %r for prompt %r", raw, prompt.strip())
            console.write_line(error_message)


def read_player_count(console: Console) -> int:
    return prompt_until_valid(console, COUNT_PROMPT, parse_player_count, COUNT_ERROR)


def read_name(console: Console) -> str:
    return prompt_until_valid(console, NAME_PROMPT, parse_name, NAME_ERROR)


def read_registration_type(console: Console) -> str:
    return prompt_until_valid(console, TYPE_PROMPT, parse_registration_type, TYPE_ERROR)


def read_jersey_choice(console: Console) -> bool:
    return prompt_until_valid(console, JERSEY_PROMPT, parse_jersey_choice, JERSEY_ERROR)
