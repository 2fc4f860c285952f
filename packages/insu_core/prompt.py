from __future__ import annotations

from typing import Iterable

from .models import Document

PRODUCT_LABEL = ">상품"
QUESTION_LABEL = ">질문="

NOT_FOUND_MESSAGE = "해당하는 데이터가 존재하지 않습니다."

PREAMBLE = (
    "'>상품1=데이터, >상품2=데이터 ..'으로 구분되는 문자열을 기반으로 대답하세요. "
    "질문은 '> 질문=' 옆에 입력됩니다."
    f"질문에 해당하는 자료가 없을 경우 '{NOT_FOUND_MESSAGE}' 라고 대답하세요."
)


def product_block(document: Document) -> str:
    """Format one document as `>상품{index}={text}`."""
    return f"{PRODUCT_LABEL}{document.index}={document.text}"


def assemble(corpus: Iterable[Document], question: str) -> str:
    """
    Build the full prompt: preamble, product blocks, then the question block.

    Blocks are concatenated back-to-back with no separator, in corpus order.
    Document text is embedded raw; the block markers are not escaped.
    """
    parts: list[str] = [PREAMBLE]
    parts.extend(product_block(doc) for doc in corpus)
    parts.append(f"{QUESTION_LABEL}{question}")
    return "".join(parts)


__all__ = ["PREAMBLE", "NOT_FOUND_MESSAGE", "PRODUCT_LABEL", "QUESTION_LABEL", "assemble", "product_block"]
