"""Chirp endpoints."""

from fastapi import APIRouter, Depends, Response

from chirpy.auth.dependencies import CurrentUser, get_current_user
from chirpy.chirps import service
from chirpy.chirps.schemas import ChirpResponse, CreateChirpRequest

router = APIRouter(prefix="/api/chirps", tags=["Chirps"])


@router.post("", status_code=201, response_model=ChirpResponse, summary="Post a chirp", description="Create a chirp of at most 140 characters. Profane words are masked.")
def create(body: CreateChirpRequest, user: CurrentUser = Depends(get_current_user)):
    return service.create_chirp(user.id, body.body)


@router.get("", response_model=list[ChirpResponse], summary="List chirps", description="All chirps, oldest first.")
def list_all():
    return service.list_chirps()


@router.get("/{chirp_id}", response_model=ChirpResponse, summary="Get a chirp")
def get(chirp_id: str):
    return service.get_chirp(chirp_id)


@router.delete("/{chirp_id}", status_code=204, summary="Delete a chirp", description="Only the chirp's author may delete it.")
def delete(chirp_id: str, user: CurrentUser = Depends(get_current_user)):
    service.delete_chirp(chirp_id, user.id)
    return Response(status_code=204)
