from fastapi import FastAPI, APIRouter, Depends
from typing import List
from common.config import configure_logging
from common.handlers import register_exception_handlers
from films.models.films import Film
from films.database.store import FilmStore, get_store
import logging

configure_logging()
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/films", tags=["films"])


@router.post("",
             response_model=Film,
             summary="Add a new movie",
             response_description="The data of the created movie",
             responses={
                 400: {"description": "The movie data is invalid"}
             })
async def create_film(film: Film, store: FilmStore = Depends(get_store)):
    return store.create(film)


@router.put("",
            response_model=Film,
            summary="Replace movie data",
            responses={
                400: {"description": "The movie data is invalid"},
                404: {"description": "The movie was not found"}
            })
async def update_film(film: Film, store: FilmStore = Depends(get_store)):
    return store.replace(film)


@router.patch("",
              response_model=Film,
              summary="Update movie data partially",
              responses={
                  400: {"description": "The movie data is invalid"},
                  404: {"description": "The movie was not found"}
              })
async def patch_film(film: Film, store: FilmStore = Depends(get_store)):
    return store.patch(film)


@router.get("",
            response_model=List[Film],
            summary="Get a list of all movies")
async def read_films(store: FilmStore = Depends(get_store)):
    films = store.list_all()
    logger.info(f"A list of films was requested, {len(films)} entries were found")
    return films


app = FastAPI(
    title="Films service",
    description="API for managing films list",
    version="1.0.0"
)
app.include_router(router)
register_exception_handlers(app)


@app.on_event("startup")
async def startup_event():
    logger.info("The movie service is ready to work, films are kept in memory")
