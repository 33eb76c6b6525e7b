"""Ok/Err values for edge operations that can fail, such as reading a stats document.

Statistics functions never return these; bad box-score data degrades to
numeric fallbacks instead.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    value: T


@dataclass(frozen=True, slots=True)
class Err[E]:
    error: E


type Result[T, E] = Ok[T] | Err[E]
