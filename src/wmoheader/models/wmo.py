"""WMO abbreviated header model."""

from typing import Self

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from wmoheader.errors import InvalidHeaderError
from wmoheader.grammar import (
    AddendumKind,
    HeaderParts,
    classify_addendum,
    compose_header,
    is_valid,
    region_for,
    split_header,
    split_product,
)


class WMOModel(BaseModel):
    """Pydantic model for a decomposed WMO abbreviated header line."""

    raw: str = Field(
        description="The complete header line (e.g., 'SXUS51 KNYC 041200 (PAA)').",
        alias="wmoHeader",
    )
    product: str = Field(description="WMO T1T2A1A2ii product heading.", alias="ttaaii")
    station: str = Field(description="Originating station identifier (CCCC).", alias="cccc")
    time: str = Field(
        description="Day-Hour-Minute group from the WMO header, kept verbatim.",
        alias="wmoDdhhmm",
    )
    addendum: str | None = Field(
        default=None,
        description="Optional BBB group without parentheses (e.g., 'CCA', 'COR', 'PAA').",
        alias="bbbIndicator",
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True, from_attributes=True)

    @model_validator(mode="after")
    def check_matches_raw(self) -> Self:
        if not is_valid(self.raw):
            msg = f"not a valid WMO header line: {self.raw!r}"
            raise ValueError(msg)
        expected = split_header(self.raw)
        if expected != HeaderParts(self.product, self.station, self.time, self.addendum):
            msg = f"header fields do not match {self.raw!r}"
            raise ValueError(msg)
        return self

    @classmethod
    def parse(cls, line: str) -> "WMOModel":
        """Validate and decompose a header line.

        Args:
            line: Header line without trailing newline or whitespace.

        Returns:
            The decomposed header.

        Raises:
            InvalidHeaderError: If the line does not match the header grammar.

        """
        if not is_valid(line):
            logger.debug("Rejected WMO header", header=line)
            raise InvalidHeaderError(line)

        parts = split_header(line)
        model = cls(
            raw=line,
            product=parts.product,
            station=parts.station,
            time=parts.time,
            addendum=parts.addendum,
        )
        logger.trace("Parsed WMO header", header=line, region=model.region)
        return model

    @classmethod
    def from_fields(
        cls,
        product: str,
        station: str,
        time: str,
        addendum: str | None = None,
    ) -> "WMOModel":
        """Build a header from its groups; the joined line must still be valid."""
        return cls.parse(compose_header(product, station, time, addendum))

    @computed_field  # type: ignore[prop-decorator]
    @property
    def t1(self) -> str:
        """Data type designator."""
        return split_product(self.product).t1

    @computed_field  # type: ignore[prop-decorator]
    @property
    def t2(self) -> str:
        """Data type sub-designator."""
        return split_product(self.product).t2

    @computed_field  # type: ignore[prop-decorator]
    @property
    def t1t2(self) -> str:
        return split_product(self.product).t1t2

    @computed_field  # type: ignore[prop-decorator]
    @property
    def a1(self) -> str:
        return split_product(self.product).a1

    @computed_field  # type: ignore[prop-decorator]
    @property
    def a2(self) -> str:
        return split_product(self.product).a2

    @computed_field  # type: ignore[prop-decorator]
    @property
    def a1a2(self) -> str:
        """Geographical or data-type designator pair."""
        return split_product(self.product).a1a2

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ii(self) -> str:
        """Two-digit distinguishing number; empty when the product is short."""
        return split_product(self.product).ii

    @computed_field  # type: ignore[prop-decorator]
    @property
    def region(self) -> str | None:
        """Region code (A1A2) for region-bearing T1 designators, otherwise None."""
        return region_for(self.product)

    @computed_field(alias="bbbKind")  # type: ignore[prop-decorator]
    @property
    def addendum_kind(self) -> AddendumKind | None:
        return classify_addendum(self.addendum)
