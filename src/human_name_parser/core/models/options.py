"""Parser configuration model."""

import json
from pathlib import Path
from typing import Annotated, List, Union
from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field

from .validators import to_list, to_word_set


DEFAULT_SUFFIXES = [
    "esq", "esquire", "phd",
    "jr", "sr", "2", "ii", "iii", "iv", "v",
    "(child)", "child",
]

DEFAULT_PREFIXES = [
    "bar", "ben", "bin", "da", "dal", "de la", "de", "del", "der", "di", "ibn", "la", "le", "san",
    "st", "ste", "van", "van der", "van den", "vel", "von",
]

DEFAULT_ACADEMIC_TITLES = [
    "ms", "miss", "mstr", "mrs", "mr", "mme", "mma", "mlle", "enfant", "prof", "dr",
    # BE / NL
    "dhr", "mw", "mej",
    # DK
    "hr", "fru", "frk",
    # DE
    "herr", "frau", "fräulein",
    # HU
    "úr", "hölgy", "ifj",
    # IT
    "sig", "sig.ra", "sig.na",
    # PL
    "pan", "pani", "panna",
    # PT / ES
    "sr", "sra", "m.na", "srta",
    # SE
    "fröken",
]


WordList = Annotated[
    List[str],
    BeforeValidator(to_list),
    AfterValidator(to_word_set),
]


class ParserOptions(BaseModel):
    """Word lists and flags that drive the name parser.

    Word list entries are literal text. They are stripped, lowercased and
    deduplicated, keeping the order of first occurrence.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    suffixes: WordList = Field(
        default_factory=lambda: list(DEFAULT_SUFFIXES),
        description="Suffixes recognised at the end of a name, such as 'jr' or 'phd'.",
    )
    prefixes: WordList = Field(
        default_factory=lambda: list(DEFAULT_PREFIXES),
        description="Surname particles that attach to the last name, such as 'van der'.",
    )
    academic_titles: WordList = Field(
        default_factory=lambda: list(DEFAULT_ACADEMIC_TITLES),
        description="Honorifics and academic titles, such as 'dr' or 'frau'.",
    )
    mandatory_first_name: bool = Field(
        True, description="Raise FirstNameNotFound when no first name can be found."
    )
    mandatory_last_name: bool = Field(
        True, description="Raise LastNameNotFound when no last name can be found."
    )

    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> "ParserOptions":
        """Load options from a JSON file holding an object with the option keys."""
        data = json.loads(Path(file_path).read_text(encoding="utf-8"))
        return cls.model_validate(data)

    def replace(self, **changes) -> "ParserOptions":
        """Return a validated copy with some options replaced."""
        data = self.model_dump()
        data.update(changes)
        return type(self).model_validate(data)
