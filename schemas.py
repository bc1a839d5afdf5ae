"""
Database Schemas

MongoDB collection schemas as Pydantic models. Each model is stored in the
collection named next to it below:
- User -> "users"
- Product -> "products"
- Store -> "stores"
- Purchase -> "purchases"
- Sale -> "sales"

References to other documents (userID, productID, storeID) hold the
referenced document's ObjectId.
"""

from pydantic import BaseModel, ConfigDict, Field, EmailStr
from typing import Optional
from bson import ObjectId

USERS = "users"
PRODUCTS = "products"
STORES = "stores"
PURCHASES = "purchases"
SALES = "sales"

# Clearing order used by the seeder
COLLECTIONS = (USERS, PRODUCTS, STORES, PURCHASES, SALES)

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


class Document(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)


class User(Document):
    """
    Users collection schema
    Collection name: "users"
    """
    firstName: str = Field(..., description="First name")
    lastName: str = Field(..., description="Last name")
    email: EmailStr = Field(..., description="Email address")
    password: str = Field(..., description="Plain text password")
    phoneNumber: Optional[str] = Field(None, description="Phone number, NNN-NNN-NNNN")
    imageUrl: Optional[str] = Field(None, description="Avatar image URL")


class Product(Document):
    """
    Products collection schema
    Collection name: "products"
    """
    userID: Optional[ObjectId] = Field(None, description="Owner user id")
    name: str = Field(..., description="Product name")
    manufacturer: str = Field(..., description="Manufacturer")
    stock: int = Field(0, ge=0, description="Units available for sale")
    description: Optional[str] = Field(None, description="Product description")


class Store(Document):
    userID: Optional[ObjectId] = Field(None, description="Owner user id")
    name: str
    category: str
    address: str
    city: str
    image: Optional[str] = Field(None, description="Store image URL")


class Purchase(Document):
    userID: ObjectId
    productID: ObjectId
    quantityPurchased: int = Field(..., gt=0)
    purchaseDate: str = Field(..., pattern=DATE_PATTERN, description="YYYY-MM-DD")
    totalPurchaseAmount: float = Field(..., ge=0)


class Sale(Document):
    userID: ObjectId
    productID: ObjectId
    storeID: ObjectId
    stockSold: int = Field(..., gt=0)
    saleDate: str = Field(..., pattern=DATE_PATTERN, description="YYYY-MM-DD")
    totalSaleAmount: float = Field(..., ge=0)


# Public/Request models (not collections)
class RegisterRequest(BaseModel):
    firstName: str
    lastName: str
    email: EmailStr
    password: str
    phoneNumber: Optional[str] = None
    imageUrl: Optional[str] = None


class LoginRequest(BaseModel):
    # Matched verbatim against stored users, so no email normalization
    email: str
    password: str
