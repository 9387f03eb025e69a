"""Shared test doubles: record types and custom-decoded field types."""

from __future__ import annotations

import queue
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from querybind.binding.errors import FieldErrors
from querybind.binding.markers import Embedded, Query


class State(int):
    """Account state stored as an int, submitted by name."""

    _NAMES = {"normal": 1, "locked": 2, "left": 3}

    @classmethod
    def unmarshal_query(cls, data: str) -> State:
        if data not in cls._NAMES:
            raise ValueError(f"invalid state: {data}")
        return cls(cls._NAMES[data])


STATE_NORMAL = State(1)
STATE_LOCKED = State(2)
STATE_LEFT = State(3)


class Slug(str):
    """Only decodable through the text capability."""

    @classmethod
    def unmarshal_text(cls, data: str) -> Slug:
        if " " in data:
            raise ValueError(f"slug may not contain spaces: {data!r}")
        return cls(data.lower())


class Tagged(str):
    """Implements both capabilities; the query decoder must win."""

    @classmethod
    def unmarshal_query(cls, data: str) -> Tagged:
        return cls(f"query:{data}")

    @classmethod
    def unmarshal_text(cls, data: str) -> Tagged:
        return cls(f"text:{data}")


class Color(Enum):
    RED = "red"
    GREEN = "green"


class Level(IntEnum):
    NONE = 0
    LOW = 1
    HIGH = 2


class QueryString(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    string: Annotated[str, Query("string,str1,str2")] = ""
    strings: Annotated[list[str], Query("strings,str1,str2")] = Field(default_factory=list)
    state: Annotated[State, Query("state,normal")] = State(0)

    def sanitize_query(self, errors: FieldErrors) -> None:
        if self.state == -1:
            errors.add("state", "invalid value")


class QueryObject(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    base: Annotated[QueryString, Embedded()] = Field(default_factory=QueryString)
    int_: Annotated[int, Query("int,1")] = 0
    floats: Annotated[list[float], Query("floats,1.1,2.2")] = Field(default_factory=list)
    states: Annotated[list[State], Query("states,normal,left")] = Field(default_factory=list)

    array: tuple[int, int, int, int, int] = (0, 0, 0, 0, 0)
    ints: Annotated[list[int], Query("-")] = Field(default_factory=list)
    float_: Annotated[float, Query("-")] = 0.0

    def sanitize_query(self, errors: FieldErrors) -> None:
        self.base.sanitize_query(errors)
        if self.int_ == 0:
            errors.add("int", "invalid value")


class UnicodeQueryString(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    string: Annotated[str, Query("字符串,str1,str2")] = ""
    strings: Annotated[list[str], Query("字符串列表,str1,str2")] = Field(default_factory=list)
    state: Annotated[State, Query("state,normal")] = State(0)


@dataclass
class Paging:
    page: Annotated[int, Query("page,1")] = 0
    size: Annotated[int, Query("size,20")] = 0


@dataclass
class Listing:
    """Dataclass record covering every field kind."""

    paging: Annotated[Paging, Embedded()] = field(default_factory=Paging)
    name: str = ""
    color: Annotated[Color, Query("color,green")] = Color.RED
    level: Annotated[Level, Query("level,1")] = Level.NONE
    slug: Annotated[Slug, Query("slug")] = Slug("")
    tagged: Annotated[Tagged, Query("tagged")] = Tagged("")
    active: Annotated[bool, Query("active")] = False
    ids: Annotated[list[int | None], Query("ids")] = field(default_factory=list)
    labels: Annotated[Sequence[str], Query("labels")] = ()
    colors: Annotated[list[Color], Query("colors")] = field(default_factory=list)

    handler: Callable[[str], str] = str
    ratio: Annotated[complex, Query("ratio,1")] = 0j
    pair: Annotated[tuple[int, int], Query("pair,1,2")] = (0, 0)
    inbox: queue.Queue = field(default_factory=queue.Queue)
    limit: Annotated[int | None, Query("limit,5")] = None


class Code(str):
    """Decoder that signals bad input with a lookup failure."""

    _CODES = {"a": "alpha", "b": "beta"}

    @classmethod
    def unmarshal_query(cls, data: str) -> Code:
        return cls(cls._CODES[data])


@dataclass
class Lookup:
    code: Annotated[Code, Query("code")] = Code("")
    codes: Annotated[list[Code], Query("codes")] = field(default_factory=list)
    count: int = 0


class Bounded(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    n: Annotated[int, Query("n"), Field(ge=0)] = 0
    ns: Annotated[list[int], Query("ns"), Field(max_length=2)] = Field(default_factory=list)
    m: int = 0


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    n: int = 0


@dataclass(frozen=True)
class FrozenPoint:
    x: int = 0
