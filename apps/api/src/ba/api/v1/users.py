from fastapi import APIRouter

from ba.core.security import CurrentUser

router = APIRouter(prefix="/users", tags=["users"])


def public_user(user) -> dict:
    """The only user fields membership responses may carry."""
    return {
        "id": str(user.id),
        "username": user.username,
        "firstName": user.first_name,
        "lastName": user.last_name,
    }


@router.get("/me")
def me(user: CurrentUser):
    return public_user(user)
