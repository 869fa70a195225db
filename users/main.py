from fastapi import FastAPI, APIRouter, Depends
from typing import List
from common.config import configure_logging
from common.handlers import register_exception_handlers
from users.models.users import User
from users.database.store import UserStore, get_store
import logging

configure_logging()
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("",
             response_model=User,
             summary="Create a new user",
             response_description="The created user",
             responses={
                 400: {"description": "The user data is invalid"}
             })
async def create_user(user: User, store: UserStore = Depends(get_store)):
    return store.create(user)


@router.put("",
            response_model=User,
            summary="Replace user",
            responses={
                400: {"description": "The user data is invalid"},
                404: {"description": "User not found"}
            })
async def update_user(user: User, store: UserStore = Depends(get_store)):
    return store.replace(user)


@router.patch("",
              response_model=User,
              summary="Update user partially",
              responses={
                  400: {"description": "The user data is invalid"},
                  404: {"description": "User not found"}
              })
async def update_user_partially(user: User, store: UserStore = Depends(get_store)):
    return store.patch(user)


@router.get("",
            response_model=List[User],
            summary="List all users")
async def list_users(store: UserStore = Depends(get_store)):
    users = store.list_all()
    logger.info(f"A list of users was requested, {len(users)} entries were found")
    return users


app = FastAPI(
    title="User management service",
    description="API for managing user profiles",
    version="1.0.0"
)
app.include_router(router)
register_exception_handlers(app)


@app.on_event("startup")
async def startup_event():
    logger.info("Application startup complete, users are kept in memory")
