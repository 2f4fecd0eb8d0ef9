# backoffice/routers/auth.py
from fastapi import APIRouter, Depends

from backoffice.core.auth import AuthContext, require_admin
from backoffice.schemas.auth import AdminMe

router = APIRouter(prefix="/admin", tags=["Admin Auth"])


@router.get("/me", response_model=AdminMe)
def read_me(ctx: AuthContext = Depends(require_admin)):
    """
    Return the signed-in admin.

    Auth:
      - Requires valid Supabase JWT.
    """
    return AdminMe(user_id=ctx.user_id, email=ctx.email, author_name=ctx.author_name)
