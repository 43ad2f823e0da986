from __future__ import annotations

from typing import Iterable, List, Sequence

from support_assistant.schemas.knowledge import FaqEntry


def describe_file_type(mime_type: str) -> str:
    value = (mime_type or "").lower()
    if value.startswith("image/"):
        return "image"
    if value.startswith("video/"):
        return "video"
    if "pdf" in value:
        return "PDF document"
    if "document" in value or "text/" in value:
        return "document"
    return "file"


def file_context_prompt(has_files: bool, file_types: Sequence[str]) -> str:
    if not has_files or not file_types:
        return ""
    kinds = ", ".join(describe_file_type(t) for t in file_types)
    return (
        f"The user has shared {len(file_types)} file(s): {kinds}. "
        "Acknowledge these files and offer relevant assistance based on the file types."
    )


def faq_context(entries: Iterable[FaqEntry], limit: int = 10) -> str:
    pairs: List[str] = []
    for entry in entries:
        if len(pairs) >= limit:
            break
        pairs.append(f"Q: {entry.question}\nA: {entry.answer}")
    return "\n\n".join(pairs)


def fallback_answer_prompt(
    *,
    query: str,
    entries: Iterable[FaqEntry],
    has_files: bool = False,
    file_types: Sequence[str] = (),
    context_limit: int = 10,
) -> str:
    return (
        "You are a helpful customer service assistant for a scooter company. "
        "Use the following FAQ context to answer the user's question. "
        "If the question is not covered in the FAQ, provide a helpful general response.\n\n"
        f"{file_context_prompt(has_files, file_types)}\n\n"
        "FAQ Context:\n"
        f"{faq_context(entries, context_limit)}\n\n"
        f"User Question: {query}\n\n"
        "Provide a helpful, accurate response. Be concise but informative.\n"
    )
