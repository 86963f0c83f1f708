from fastapi import APIRouter

router = APIRouter()

@router.get("/")
def read_root():
    return {"message": "Twitter card parser is running"}
