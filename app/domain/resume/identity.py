"""식별 토큰 발급.

세션 수명 동안 충돌 확률을 0으로 취급할 수 있는 불투명 문자열을 만든다.
전역 레지스트리나 영속화는 없다.
"""

import uuid


def new_token() -> str:
    """새 식별 토큰 반환"""
    return str(uuid.uuid4())


def new_unique_token(taken: set[str]) -> str:
    """taken에 없는 새 식별 토큰 반환"""
    token = new_token()
    while token in taken:
        token = new_token()
    return token
