"""Data contracts for the growth, contribution and timing series."""

from typing import Any, ClassVar, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from growthlab.config import settings


class GrowthPoint(BaseModel):
    """One year of simple vs. compound growth of a single principal."""

    model_config = ConfigDict(frozen=True)

    year: int = Field(..., ge=0)
    simple: float = Field(..., ge=0)
    compound: float = Field(..., ge=0)


class ContributionPoint(BaseModel):
    """Account balance split into deposited principal and earned interest."""

    model_config = ConfigDict(frozen=True)

    year: int = Field(..., ge=0)
    total: float = Field(..., ge=0)
    contributions: float = Field(..., ge=0)
    interest: float


class TimingPoint(BaseModel):
    """Balances of an early and a late saver at a whole-year boundary."""

    model_config = ConfigDict(frozen=True)

    year: int = Field(..., ge=0)
    early: float = Field(..., ge=0)
    late: float = Field(..., ge=0)


class ChartDataset(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    values: List[float]
    stroke: str
    fill_color: Optional[str] = None
    dashed: bool = False


class ChartSeries(BaseModel):
    """Year labels plus one dataset per plotted channel."""

    model_config = ConfigDict(frozen=True)

    labels: List[int]
    datasets: List[ChartDataset]


class _SeriesRequest(BaseModel):
    """Common request behaviour: finite numbers only, upper caps from settings.

    The caps come from the `settings` entry of the validation context, falling
    back to the process-wide settings when none is given.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    # field name -> Settings attribute holding its upper cap
    field_limits: ClassVar[Dict[str, str]] = {}

    include_chart: bool = Field(
        False,
        description="Also return the chart datasets built from the points.",
    )

    @field_validator("*")
    @classmethod
    def within_limit(cls, value: Any, info: ValidationInfo) -> Any:
        limit_name = cls.field_limits.get(info.field_name)
        if limit_name is None:
            return value
        limits = (info.context or {}).get("settings") or settings
        limit = getattr(limits, limit_name)
        if value > limit:
            raise PydanticCustomError(
                "less_than_equal",
                "Input should be less than or equal to {le}",
                {"le": limit},
            )
        return value


class GrowthRequest(_SeriesRequest):
    """Inputs for the lump-sum growth comparison.

    Negative or fractional values are accepted; the simulator clamps them.
    """

    field_limits: ClassVar[Dict[str, str]] = {
        "principal": "MAX_AMOUNT",
        "rate": "MAX_RATE",
        "years": "MAX_HORIZON_YEARS",
        "frequency": "MAX_FREQUENCY",
    }

    principal: float = Field(..., description="Amount invested at year 0.")
    rate: float = Field(
        ...,
        description="Annual rate expressed as a decimal (e.g. 0.05 for 5%).",
    )
    years: float = Field(..., description="Number of years to project.")
    frequency: float = Field(..., description="Compounding periods per year.")


class ContributionRequest(_SeriesRequest):
    """Inputs for monthly deposits plus a yearly bonus deposit."""

    field_limits: ClassVar[Dict[str, str]] = {
        "initial": "MAX_AMOUNT",
        "monthly": "MAX_AMOUNT",
        "annual_bonus": "MAX_AMOUNT",
        "rate": "MAX_RATE",
        "years": "MAX_HORIZON_YEARS",
    }

    initial: float = Field(..., description="Deposit made at year 0.")
    monthly: float = Field(..., description="Deposit added after each month's interest.")
    annual_bonus: float = Field(..., description="Deposit added at the end of each year.")
    rate: float = Field(
        ...,
        description="Annual rate as a decimal, compounded monthly.",
    )
    years: float = Field(..., description="Number of years to project.")


class TimingRequest(_SeriesRequest):
    """Inputs comparing the same deposit plan started now or later."""

    field_limits: ClassVar[Dict[str, str]] = {
        "monthly": "MAX_AMOUNT",
        "rate": "MAX_RATE",
        "years_investing": "MAX_HORIZON_YEARS",
        "delay_years": "MAX_HORIZON_YEARS",
        "horizon_years": "MAX_HORIZON_YEARS",
    }

    monthly: float = Field(..., description="Deposit made by each saver every active month.")
    years_investing: float = Field(..., description="How long each saver keeps depositing.")
    delay_years: float = Field(..., description="How much later the late saver starts.")
    rate: float = Field(
        ...,
        description="Annual rate as a decimal, compounded monthly.",
    )
    horizon_years: float = Field(..., description="Number of years to project.")


class GrowthResponse(BaseModel):
    points: List[GrowthPoint]
    chart: Optional[ChartSeries] = None


class ContributionResponse(BaseModel):
    points: List[ContributionPoint]
    chart: Optional[ChartSeries] = None


class TimingResponse(BaseModel):
    points: List[TimingPoint]
    chart: Optional[ChartSeries] = None
