from pydantic import BaseModel


class Token(BaseModel):
    """
    Access token returned after a successful login.
    """
    access_token: str
    token_type: str
