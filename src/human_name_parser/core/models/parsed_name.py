"""Parsed name data model."""

from typing import Annotated, List, Optional
from pydantic import AfterValidator, BaseModel, BeforeValidator, Field

from .validators import to_str, empty_to_none, none_to_empty, normalize


class ParsedName(BaseModel):
    """The components of a single human name.

    Every component is optional: an absent component is ``None``, except the
    middle name, where the empty string means absent.
    """

    academic_title: Optional[
        Annotated[
            str,
            BeforeValidator(to_str),
            AfterValidator(empty_to_none),
            AfterValidator(normalize),
        ]
    ] = Field(None, description="Contains an honorific or academic title, such as 'Dr' or 'Mrs'.")

    leading_initial: Optional[
        Annotated[
            str,
            BeforeValidator(to_str),
            AfterValidator(empty_to_none),
            AfterValidator(normalize),
        ]
    ] = Field(
        None,
        description="Contains a single initial written before the first name, as in 'J. Edgar Hoover'.",
    )

    first_name: Optional[
        Annotated[
            str,
            BeforeValidator(to_str),
            AfterValidator(empty_to_none),
            AfterValidator(normalize),
        ]
    ] = Field(None, description="Contains a first name, given or baptismal name.")

    middle_name: Annotated[
        str,
        BeforeValidator(to_str),
        BeforeValidator(none_to_empty),
        AfterValidator(normalize),
    ] = Field(
        "",
        description="Contains the middle name(s), written between the first name and the last name.",
    )

    nickname: Optional[
        Annotated[
            str,
            BeforeValidator(to_str),
            AfterValidator(empty_to_none),
            AfterValidator(normalize),
        ]
    ] = Field(None, description="Contains a quoted or parenthesised nickname.")

    last_name: Optional[
        Annotated[
            str,
            BeforeValidator(to_str),
            AfterValidator(empty_to_none),
            AfterValidator(normalize),
        ]
    ] = Field(
        None,
        description="Contains a family name including its prefixes, such as 'van der Berg'.",
    )

    suffix: Optional[
        Annotated[
            str,
            BeforeValidator(to_str),
            AfterValidator(empty_to_none),
            AfterValidator(normalize),
        ]
    ] = Field(None, description="Contains a generational or professional suffix, such as 'Jr' or 'PhD'.")

    def components(self) -> List[str]:
        """Return the present components in canonical order.

        The nickname is not part of the canonical order.
        """
        parts = [
            self.academic_title,
            self.leading_initial,
            self.first_name,
            self.middle_name,
            self.last_name,
            self.suffix,
        ]
        return [part for part in parts if part]

    @property
    def full_name(self) -> str:
        return " ".join(self.components())

    def __str__(self) -> str:
        return self.full_name
