"""Required/optional score aggregation.

One formula is applied at three granularities (attribute, element and
document):

  - required and optional records are averaged separately;
  - when both buckets are populated the total is the mean of the two
    averages, so each bucket weighs 50% regardless of how many checks
    feed it;
  - when only one bucket is populated the total is that bucket's average;
  - an empty record set scores 0.

The document score pools the raw per-record sums and counts of every
element before applying the formula once. It is not a mean of the
per-element totals: an element checked on more attributes carries more
weight.
"""

from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel, Field

from sbom_comply.core.store import RecordStore
from sbom_comply.models.record import Record
from sbom_comply.models.report import Summary


class ScoreResult(BaseModel):
    """Raw required/optional tallies for a set of records."""

    model_config = {"frozen": True}

    required_sum: float = Field(default=0.0, description="Sum of required scores")
    optional_sum: float = Field(default=0.0, description="Sum of optional scores")
    required_count: int = Field(default=0, description="Number of required records")
    optional_count: int = Field(default=0, description="Number of optional records")

    @classmethod
    def from_records(cls, records: Iterable[Record]) -> "ScoreResult":
        """Tally a set of records."""
        required_sum = optional_sum = 0.0
        required_count = optional_count = 0

        for r in records:
            if r.required:
                required_sum += r.score
                required_count += 1
            else:
                optional_sum += r.score
                optional_count += 1

        return cls(
            required_sum=required_sum,
            optional_sum=optional_sum,
            required_count=required_count,
            optional_count=optional_count,
        )

    def __add__(self, other: "ScoreResult") -> "ScoreResult":
        return ScoreResult(
            required_sum=self.required_sum + other.required_sum,
            optional_sum=self.optional_sum + other.optional_sum,
            required_count=self.required_count + other.required_count,
            optional_count=self.optional_count + other.optional_count,
        )

    @property
    def required_score(self) -> float:
        """Average of the required bucket, 0 when empty."""
        if self.required_count == 0:
            return 0.0
        return self.required_sum / self.required_count

    @property
    def optional_score(self) -> float:
        """Average of the optional bucket, 0 when empty."""
        if self.optional_count == 0:
            return 0.0
        return self.optional_sum / self.optional_count

    @property
    def total_score(self) -> float:
        """Combined score of both buckets."""
        if self.required_count == 0 and self.optional_count == 0:
            return 0.0
        if self.required_count == 0:
            return self.optional_score
        if self.optional_count == 0:
            return self.required_score
        return (self.required_score + self.optional_score) / 2


class ScoreAggregator:
    """Compute scores from the records held in a store.

    Example:
        aggregator = ScoreAggregator(store)
        aggregator.score_of_element("doc")
        aggregator.score_of_document()
    """

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def attribute_result(self, key: int, id: str) -> ScoreResult:
        return ScoreResult.from_records(self._store.by_check_key_and_id(key, id))

    def element_result(self, id: str) -> ScoreResult:
        return ScoreResult.from_records(self._store.by_id(id))

    def document_result(self) -> ScoreResult:
        """Pool the raw tallies of every element."""
        pooled = ScoreResult()
        for id in sorted(self._store.all_ids()):
            pooled = pooled + self.element_result(id)
        return pooled

    def score_of_attribute(self, key: int, id: str) -> float:
        """Score of one attribute of one element."""
        return self.attribute_result(key, id).total_score

    def score_of_element(self, id: str) -> float:
        """Total score of one element across all its attributes."""
        return self.element_result(id).total_score

    def score_of_document(self) -> float:
        """Pooled score of the whole document."""
        return self.document_result().total_score

    def summary(self, max_score: float = 10.0) -> Summary:
        """Build the report summary."""
        result = self.document_result()
        return Summary(
            total_score=result.total_score,
            max_score=max_score,
            required_elements_score=result.required_score,
            optional_elements_score=result.optional_score,
        )
