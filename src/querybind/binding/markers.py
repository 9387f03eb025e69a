"""``Annotated`` metadata markers that declare how a field is bound.

    class Listing(BaseModel):
        page: Annotated[int, Query("page,1")] = 0
        tags: Annotated[list[str], Query("tags,a,b")] = Field(default_factory=list)
        internal: Annotated[str, Query("-")] = ""
        paging: Annotated[Paging, Embedded()] = Field(default_factory=Paging)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Query:
    """Binding annotation in the form ``name[,default]`` or ``-`` to skip.

    The default only applies while the field holds its type's structural
    zero; types without a no-argument constructor (``date``, ``UUID``, enums
    lacking a zero-valued member) have no zero, so their default never applies.
    """

    tag: str = ""


@dataclass(frozen=True)
class Embedded:
    """Flatten the sub-record's fields into the parent's parameter names."""
