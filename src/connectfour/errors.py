# src/connectfour/errors.py

from __future__ import annotations


class InvalidColumn(ValueError):
    """Column text that is not a number, out of range, or names a full column."""


class ContractViolation(RuntimeError):
    """The game was driven in a way the board never allows (a caller bug)."""


class QuitGame(Exception):
    """The input source stopped supplying moves."""


class ScriptExhausted(QuitGame):
    pass
