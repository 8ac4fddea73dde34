"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, ConfigDict, Field

from config import config

_limits = config.simulation


# Catalog
class GameSummaryResponse(BaseModel):
    """Game menu entry."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    edge_range: str
    description: str


# Roulette
class RouletteBetResponse(BaseModel):
    """A roulette bet with its EV for the requested stake."""

    name: str
    payout: float
    probability: float
    numbers: int
    expected_value: float
    expected_value_display: str
    house_edge_percent: float
    rtp_percent: float


class RouletteResponse(BaseModel):
    """Roulette variant analysis."""

    variant: str
    name: str
    total_pockets: int
    zero_pockets: int
    house_edge_percent: float
    house_edge_display: str
    bet_amount: float
    bets: list[RouletteBetResponse]


# Blackjack
class StrategyResponse(BaseModel):
    """A blackjack strategy and its expected loss for the session."""

    key: str
    name: str
    house_edge_percent: float
    description: str
    expected_loss: float


class BlackjackResponse(BaseModel):
    """Blackjack strategy comparison."""

    hands: int
    bet_size: float
    total_wagered: float
    selected: StrategyResponse
    strategies: list[StrategyResponse]


# Slots
class SlotProfileResponse(BaseModel):
    """Slot machine profile."""

    key: str
    name: str
    house_edge_percent: float
    rtp_percent: float
    description: str


class SlotSessionPointResponse(BaseModel):
    """Sampled point of a slot session."""

    model_config = ConfigDict(from_attributes=True)

    spin: int
    bankroll: float
    expected: float


class SlotsResponse(BaseModel):
    """Slot session analysis."""

    slot: SlotProfileResponse
    spins: int
    bet_per_spin: float
    total_wagered: float
    expected_return: float
    expected_loss: float
    comparison: list[SlotProfileResponse]
    session: list[SlotSessionPointResponse]


# Craps
class CrapsBetResponse(BaseModel):
    """Craps bet."""

    name: str
    house_edge_percent: float
    description: str


class CrapsResponse(BaseModel):
    """Craps bets ranked by house edge."""

    bets: list[CrapsBetResponse]
    worst_bets: list[CrapsBetResponse]


# Bankroll simulator
class RiskRequest(BaseModel):
    """Session parameters for a bankruptcy risk estimate."""

    starting_bankroll: float = Field(
        default=_limits.default_bankroll,
        ge=_limits.min_bankroll,
        le=_limits.max_bankroll,
    )
    bet_amount: float = Field(
        default=_limits.default_bet,
        ge=_limits.min_bet,
        le=_limits.max_bet,
    )
    house_edge: float = Field(
        default=_limits.default_house_edge,
        ge=_limits.min_house_edge,
        le=_limits.max_house_edge,
        description="House edge percentage",
    )
    rounds: int = Field(
        default=_limits.default_rounds,
        ge=_limits.min_rounds,
        le=_limits.max_rounds,
    )


class SimulationRequest(RiskRequest):
    """Request to simulate a bankroll over a session."""

    seed: int | None = Field(default=None, description="Seed for a reproducible run")


class SimulationPointResponse(BaseModel):
    """Bankroll after a round."""

    model_config = ConfigDict(from_attributes=True)

    round: int
    bankroll: float


class SimulationSummaryResponse(BaseModel):
    """Headline figures of a simulation."""

    starting_bankroll: float
    final_bankroll: float
    final_bankroll_display: str
    total_wagered: float
    net_result: float
    net_result_display: str
    expected_loss: float
    expected_bankroll: float
    bankruptcy_risk_percent: float
    bankruptcy_risk_display: str
    rounds_played: int
    went_broke: bool


class SimulationResponse(BaseModel):
    """Simulated bankroll path and its summary."""

    points: list[SimulationPointResponse]
    summary: SimulationSummaryResponse


class RiskResponse(BaseModel):
    """Bankruptcy risk estimate."""

    expected_loss: float
    expected_bankroll: float
    bankruptcy_risk_percent: float
    bankruptcy_risk_display: str
