from pydantic import BaseModel, Field, ValidationError, field_validator
from typing import Any, Iterable, List, Optional, Union

from luckdraw.errors import InvalidArgument, InvalidWeight
from luckdraw.luck_rules import LOG_FIT_A, LOG_FIT_C


class Candidate(BaseModel):
    identifier: Any = Field(..., description="Key of the entry, unique within one selection")
    luckiness: Union[int, float] = Field(..., description="Rank of the entry. Only the order matters")
    weight: Optional[Union[int, float]] = Field(
        default=None,
        description="Base weight before luck is applied. Missing means 1"
    )
    payload: Any = Field(default=None, description="Value handed back when picked")

    @field_validator("identifier")
    def hashable(cls, v):
        try:
            hash(v)
        except TypeError:
            raise ValueError("identifier must be hashable")
        return v

    @field_validator("weight")
    def positive(cls, v):
        if v is not None and not v > 0:
            raise ValueError("weight must be positive")
        return v

    @property
    def base_weight(self) -> Union[int, float]:
        return 1 if self.weight is None else self.weight

    @property
    def value(self) -> Any:
        """Payload if one was given, otherwise the identifier."""
        if "payload" in self.model_fields_set:
            return self.payload
        return self.identifier


class WeightedCandidate(BaseModel):
    candidate: Candidate
    effective_weight: Union[int, float]

    @property
    def identifier(self) -> Any:
        return self.candidate.identifier

    @property
    def luckiness(self) -> Union[int, float]:
        return self.candidate.luckiness


class MultiplierCurve(BaseModel):
    """Constants of y = a * ln(c * x). Both positive keeps the curve rising."""
    a: float = Field(LOG_FIT_A, gt=0)
    c: float = Field(LOG_FIT_C, gt=0)


def to_candidates(entries: Iterable[Any]) -> List[Candidate]:
    """
    Coerces candidates or plain mappings into Candidate records.
    Raises InvalidWeight when a weight is not positive, InvalidArgument on
    other malformed entries or repeated identifiers.
    """
    candidates: List[Candidate] = []
    seen = set()

    for index, entry in enumerate(entries):
        if isinstance(entry, Candidate):
            candidate = entry
        else:
            try:
                candidate = Candidate.model_validate(entry)
            except ValidationError as exc:
                if any(err["loc"][:1] == ("weight",) for err in exc.errors()):
                    raise InvalidWeight(f"Candidate at position {index} needs a positive weight") from exc
                raise InvalidArgument(f"Malformed candidate at position {index}: {exc}") from exc

        if candidate.identifier in seen:
            raise InvalidArgument(f"Duplicate candidate identifier: {candidate.identifier!r}")
        seen.add(candidate.identifier)
        candidates.append(candidate)

    return candidates
