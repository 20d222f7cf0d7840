"""
Schémas Pydantic pour l'inscription, la connexion et le profil utilisateur.
"""

from pydantic import BaseModel, EmailStr, field_validator


class UserRegister(BaseModel):
    email: EmailStr
    password: str

    @field_validator("password")
    @classmethod
    def password_length(cls, v: str) -> str:
        # bcrypt ignore tout ce qui dépasse 72 octets
        if len(v) < 8:
            raise ValueError("Le mot de passe doit contenir au moins 8 caractères.")
        if len(v.encode("utf-8")) > 72:
            raise ValueError("Le mot de passe ne peut pas dépasser 72 octets.")
        return v


class UserLogin(BaseModel):
    """Pas de validation du format d'email : une erreur de connexion reste indistincte."""
    email: str
    password: str


class RegisterResponse(BaseModel):
    id: int


class TokenResponse(BaseModel):
    token: str
    token_type: str = "bearer"


class UserResponse(BaseModel):
    id: int
    email: str

    model_config = {"from_attributes": True}
