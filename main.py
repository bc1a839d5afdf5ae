from fastapi import APIRouter, Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from bson import ObjectId
from pymongo.database import Database

from config import PORT, TEST_PRODUCT_ID
from database import create_document, get_db, serialize_doc
from logging_setup import get_logger
from schemas import PRODUCTS, USERS, LoginRequest, RegisterRequest, User

logger = get_logger(__name__)

app = FastAPI(title="Inventory Management API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

router = APIRouter()


def backend_error(action: str, e: Exception) -> HTTPException:
    logger.error(f"Error during {action}: {e}")
    return HTTPException(status_code=500, detail=str(e))


# Auth endpoints
@router.post("/login")
def login(payload: LoginRequest, db: Database = Depends(get_db)):
    try:
        user = db[USERS].find_one({"email": payload.email, "password": payload.password})
    except Exception as e:
        raise backend_error("login", e)
    if not user:
        return PlainTextResponse("Invalid Credentials", status_code=401)
    return serialize_doc(user)


@router.post("/register")
def register(payload: RegisterRequest, db: Database = Depends(get_db)):
    user = User(**payload.model_dump())
    try:
        user_id = create_document(db, USERS, user)
        created = db[USERS].find_one({"_id": ObjectId(user_id)})
    except Exception as e:
        raise backend_error("registration", e)
    return serialize_doc(created)


# Products
@router.get("/testget")
def test_get(db: Database = Depends(get_db)):
    try:
        product = db[PRODUCTS].find_one({"_id": ObjectId(TEST_PRODUCT_ID)})
    except Exception as e:
        raise backend_error("product lookup", e)
    return serialize_doc(product)


app.include_router(router)
app.include_router(router, prefix="/api")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=PORT)
