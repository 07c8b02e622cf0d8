"""Gemini request payload assembly.

This module is intentionally narrow: it only combines the fixed pharmacist
system instruction with the caller's query in the shape expected by the
`generateContent` endpoint. Validation and model invocation happen outside
this module.

Design constraints:
    - Deterministic construction for identical inputs.
    - Fixed ordering: system instruction first, user query second.
    - No hidden side effects (no I/O, no global state mutation).

Prompt safety model:
    - Safety is instruction-led, not parser-enforced.
    - The user query is forwarded as a raw, unmodified string.
"""


# =========================================================
# SYSTEM PROMPT (GLOBAL)
# =========================================================
# Sent as the first text part of every request.

SYSTEM_PROMPT = """You are an AI Pharmacist for the pharmacy "New Lucky Pharma" in India.

Your goals:
- If the user starts with a simple greeting (e.g., "Hi", "Hello", "How are you?"), reply briefly with a friendly, single-sentence greeting and ask how you can help (e.g., "Hello! How can I assist you with your health questions today?").
- For all other queries (i.e., medical questions, product questions), reply directly and immediately to the user's query. Do not add any extra conversational text.
- Help customers understand medicines, their uses, and basic health questions.
- IMPORTANT: Always answer medical/product queries in numbered points (1., 2., 3., etc.), with each point on a separate line.
- Keep Answer short and clean, aiming for 5 to 10 lines maximum.
- Keep each point short and clear.
- Do not write long paragraphs; break information into separate numbered points.
- You are NOT a doctor. Always end replies with: Please consult a doctor for serious advice.

Example format for medical query:
1. Medicine name and type
2. How it is used
3. When to take it
4. Important warnings"""


def build_gemini_body(query: str) -> dict:
    """Build a `generateContent` request body for one user query.

    Args:
        query: Raw user query, already validated by the caller.

    Returns:
        `{"contents": [{"parts": [{"text": SYSTEM_PROMPT}, {"text": query}]}]}`.
        A new dict is returned on each call.
    """
    return {
        "contents": [
            {
                "parts": [
                    {"text": SYSTEM_PROMPT},
                    {"text": query},
                ],
            },
        ],
    }
