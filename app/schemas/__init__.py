from app.schemas.user import UserCreate
from app.schemas.post import PostCreate
