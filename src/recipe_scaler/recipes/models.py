import dataclasses
from typing import Dict, List, Optional


@dataclasses.dataclass(frozen=True)
class ServingDirective:
    """Serving counts declared at the top of a recipe note.

    `original_text` and `scaled_text` keep the numbers exactly as written so
    the directive can be written back without reformatting. `start` and `end`
    locate the directive within the note.
    """

    original: float
    scaled: float
    original_text: str
    scaled_text: str
    start: int
    end: int
    legacy: bool = False

    @property
    def scale_factor(self) -> float:
        return self.scaled / self.original

    def to_text(self) -> str:
        return f"{{original={self.original_text}, scaled={self.scaled_text}}}"


@dataclasses.dataclass
class RecipeMetadata:
    """Recipe card fields read from a bracketed header."""

    original: Optional[str] = None
    scaled: Optional[str] = None
    title: Optional[str] = None
    color: Optional[str] = None
    chips: List[str] = dataclasses.field(default_factory=list)
    extra: Dict[str, str] = dataclasses.field(default_factory=dict)
