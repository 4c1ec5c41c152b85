import uuid

from sqlalchemy import Column, String

from app.database import Base


class User(Base):
    """A login identity. Only the bcrypt hash of the password is stored."""

    __tablename__ = "users"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    username = Column(String(150), nullable=False, unique=True, index=True)
    password_hash = Column(String(60), nullable=False)

    def __repr__(self) -> str:
        return f"<User id={self.id!r} username={self.username!r}>"
