# app/routers/greetings.py
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


# Homepage
@router.get("/", response_class=PlainTextResponse)
def read_root():
    return "Hello World!"


@router.get("/hello", response_class=PlainTextResponse)
def read_hello():
    return "Hello from /hello Route"
