"""
Profile, follow and user search endpoints.
"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.profile import (ProfileResponse, ProfileUpdate, PublicProfileResponse, UserSearchResult,
                                 UserSummary, )
from app.services.social_service import SocialService

router = APIRouter()


@router.get("/profile", summary="Get the current user's profile.", response_model=ProfileResponse, )
def get_profile(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = SocialService(db)
    return service.get_profile(user)


@router.put("/profile", summary="Save the current user's profile.", response_model=ProfileResponse, )
def update_profile(data: ProfileUpdate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = SocialService(db)
    return service.update_profile(user, data)


# Declared before /users/{user_id}/profile so "search" is not taken for a user id
@router.get("/users/search", summary="Search users by email or name.", response_model=list[UserSearchResult], )
def search_users(q: str = Query(..., min_length=1, max_length=100, description="Text to search for"),
                 limit: int = Query(20, ge=1, le=50), db: Session = Depends(get_db),
                 user: User = Depends(get_current_user), ):
    service = SocialService(db)
    return service.search(user.id, q, limit=limit)


@router.get("/users/{user_id}/profile", summary="Get another user's profile.",
            response_model=PublicProfileResponse, )
def get_user_profile(user_id: str, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = SocialService(db)
    return service.get_public_profile(user.id, user_id)


@router.post("/follows/{user_id}", summary="Follow a user.", status_code=status.HTTP_201_CREATED, )
def follow_user(user_id: str, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = SocialService(db)
    service.follow(user.id, user_id)
    return {"ok": True}


@router.delete("/follows/{user_id}", summary="Unfollow a user.", status_code=status.HTTP_204_NO_CONTENT, )
def unfollow_user(user_id: str, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = SocialService(db)
    service.unfollow(user.id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/followers", summary="Users following the current user.", response_model=list[UserSummary], )
def list_followers(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = SocialService(db)
    return service.followers(user.id)


@router.get("/following", summary="Users the current user follows.", response_model=list[UserSummary], )
def list_following(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = SocialService(db)
    return service.following(user.id)
