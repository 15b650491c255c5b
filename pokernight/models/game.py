from datetime import date
from typing import Annotated, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel


GameType = Literal["tournament", "cash"]
GameStatus = Literal["scheduled", "completed"]
RSVPStatus = Literal["yes", "no", "pending"]


class SideBetEntry(BaseModel):
    """Participación de un jugador en una apuesta lateral del juego"""

    side_bet_id: Optional[str] = None
    name: Optional[str] = None
    participated: bool = False
    won: bool = False

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class GroupSideBet(BaseModel):
    """Apuesta lateral configurada a nivel de grupo"""

    id: str
    name: str
    amount: float = 0

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class ResultBase(BaseModel):
    user_id: Optional[str] = None
    rebuys: Optional[int] = 0

    # Formato legacy del best hand (None = no informado)
    best_hand_participant: Optional[bool] = None
    best_hand_winner: Optional[bool] = None
    side_bets: list[SideBetEntry] = []

    rsvp_status: Optional[RSVPStatus] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class TournamentResult(ResultBase):
    """Resultado de un jugador en un torneo"""

    game_type: Literal["tournament"] = "tournament"

    position: Optional[int] = None  # Se permiten empates
    winnings: float = 0


class CashResult(ResultBase):
    """Resultado de un jugador en una mesa cash"""

    game_type: Literal["cash"] = "cash"

    cash_out_amount: float = Field(
        0,
        validation_alias=AliasChoices("cashOutAmount", "cash_out_amount", "winnings"),
        serialization_alias="cashOutAmount",
    )
    buy_in_amount: Optional[float] = None  # Total comprado en la sesión

    @property
    def winnings(self) -> float:
        return self.cash_out_amount

    @property
    def position(self) -> None:
        return None


GameResult = Annotated[
    Union[TournamentResult, CashResult],
    Field(discriminator="game_type"),
]


class Game(BaseModel):
    """Juego de una noche de poker (programado o terminado)"""

    game_id: Optional[str] = None
    group_id: Optional[str] = None

    date: date
    time: Optional[str] = None

    status: GameStatus = "completed"
    buyin: Optional[float] = None
    game_type: GameType = "tournament"

    results: list[GameResult] = []

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @model_validator(mode="before")
    @classmethod
    def _tag_results(cls, data):
        # El tipo de resultado lo define el juego, no cada resultado
        if not isinstance(data, dict):
            return data

        game_type = data.get("gameType", data.get("game_type")) or "tournament"
        results = data.get("results")
        if not results:
            return data

        tagged = []
        for result in results:
            if isinstance(result, dict) and "gameType" not in result and "game_type" not in result:
                result = {**result, "gameType": game_type}
            tagged.append(result)

        return {**data, "results": tagged}

    def buyin_amount(self, default: float) -> float:
        """Buy-in configurado para este juego (0 o vacío usa el default)"""
        return self.buyin or default

    @property
    def is_scheduled(self) -> bool:
        return self.status == "scheduled"

    @property
    def is_cash(self) -> bool:
        return self.game_type == "cash"


class Group(BaseModel):
    group_id: str
    name: str

    class Config:
        alias_generator = to_camel
        populate_by_name = True
