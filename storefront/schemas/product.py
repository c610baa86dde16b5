from pydantic import BaseModel


class ProductResponse(BaseModel):
    id: str
    name: str
    price: float
    description: str
    badge: str

    class Config:
        from_attributes = True
