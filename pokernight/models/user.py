from typing import Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class User(BaseModel):
    user_id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None

    display_name: Optional[str] = None
    is_placeholder: bool = False  # Usuario sintético (borrado del grupo)

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @classmethod
    def placeholder(cls, user_id: str) -> "User":
        """Usuario de reemplazo para un userId que ya no existe"""
        suffix = user_id[-8:]
        return cls(
            user_id=user_id,
            first_name="Unknown",
            last_name="User",
            email=f"unknown-{suffix}@placeholder.com",
            display_name=f"Unknown User ({suffix})",
            is_placeholder=True,
        )

    @property
    def player_name(self) -> str:
        """Nombre para mostrar en la tabla de posiciones"""
        if self.is_placeholder:
            return f"{self.display_name} (Removed)"

        full_name = f"{self.first_name or ''} {self.last_name or ''}".strip()
        return full_name or self.display_name or self.email or "Unknown"
