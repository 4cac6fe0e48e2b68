from pydantic import BaseModel, Field
from typing import List, Optional


# Request DTOs
class CodeVariantsRequest(BaseModel):
    uuid: str
    store: bool = False  # register display/secure codes in the lookup store


class BatchCodeVariantsRequest(BaseModel):
    uuids: List[str] = Field(..., min_length=1)


class ValidateShortCodeRequest(BaseModel):
    code: str


class ValidateSecureCodeRequest(BaseModel):
    code: str
    uuid: str


class ParseRequest(BaseModel):
    payload: str


# Response DTOs
class CodeVariants(BaseModel):
    uuid: str
    short_code: str
    display_code: str
    secure_code: str


class BatchCodeVariantsResult(BaseModel):
    uuid: str
    short_code: str = ""
    display_code: str = ""
    secure_code: str = ""
    success: bool
    error: Optional[str] = None


class DecodedCode(BaseModel):
    code: str
    uuid: str


class ParsedQRData(BaseModel):
    short_code: str
    uuid: str
    is_url: bool = False
    base_url: Optional[str] = None
