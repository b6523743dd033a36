import bcrypt
from sqlmodel.ext.asyncio.session import AsyncSession

from src.domain.entities import User, UserRole


async def create_test_user(db_session: AsyncSession, data: dict) -> User:
    """Insert a user from a test_data.json entry"""
    user = User(
        username=data["username"],
        email=data.get("email"),
        password_hash=bcrypt.hashpw(data["password"].encode(), bcrypt.gensalt(4)).decode(),
        role=UserRole(data.get("role", "stembassador")),
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


def reset_token_from(mailer, email: str) -> str:
    """Extract the raw secret from the last reset email sent to an address"""
    [message] = mailer.messages_to(email)
    html = message.get_body(preferencelist=("html",)).get_content()
    start = html.index("/reset-password/") + len("/reset-password/")
    return html[start:start + 64]
