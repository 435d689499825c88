"""
Refresh token repository.

Stores hashed refresh tokens and enforces the per-user session cap.
"""

from typing import Optional

from sqlmodel import Session, col, select

from app.models.refresh_token import RefreshToken


class RefreshTokenRepository:
    """Repository for RefreshToken database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, token: RefreshToken) -> RefreshToken:
        self.session.add(token)
        self.session.commit()
        self.session.refresh(token)
        return token

    def get_by_hash(self, token_hash: str) -> Optional[RefreshToken]:
        statement = select(RefreshToken).where(RefreshToken.token_hash == token_hash)
        return self.session.exec(statement).first()

    def list_for_user(self, user_id: str) -> list[RefreshToken]:
        statement = (select(RefreshToken).where(RefreshToken.user_id == user_id)
                     .order_by(col(RefreshToken.created_at).desc()))
        return list(self.session.exec(statement).all())

    def delete(self, token: RefreshToken) -> None:
        self.session.delete(token)
        self.session.commit()

    def evict_oldest(self, user_id: str, keep: int) -> int:
        """
        Delete every token of the user except the ``keep`` most recent.

        Returns:
            Number of evicted tokens
        """
        statement = (select(RefreshToken).where(RefreshToken.user_id == user_id)
                     .order_by(col(RefreshToken.created_at).desc(), col(RefreshToken.id).desc())
                     .offset(keep))
        stale = list(self.session.exec(statement).all())
        for token in stale:
            self.session.delete(token)
        if stale:
            self.session.commit()
        return len(stale)

    def delete_all_for_user(self, user_id: str, commit: bool = True) -> int:
        tokens = self.list_for_user(user_id)
        for token in tokens:
            self.session.delete(token)
        if commit:
            self.session.commit()
        return len(tokens)
