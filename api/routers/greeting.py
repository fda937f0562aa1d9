from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter()

GREETING_MESSAGE = (
    "여기까지 오시느라 수많은 에러와 싸우며 삽질(?) 좀 하셨죠? 대단합니다! 👏👏 "
    "그 끈기에 박수를 보내며, 당신의 멋진 개발 여정을 응원합니다. https://postgresql.co.kr"
)


class GreetingResponse(BaseModel):
    message: str


@router.get("/", response_model=GreetingResponse)
async def hello():
    # 요청마다 새로 만드는 고정 응답
    return {"message": GREETING_MESSAGE}
