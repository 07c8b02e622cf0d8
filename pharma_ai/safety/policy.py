"""Fixed user-facing replies.

Every reply that does not come verbatim from the model is defined here so the
engine, the interpreter and the tests agree on exact wording. All replies
except the input-validation message end with `DOCTOR_DISCLAIMER`.
"""

DOCTOR_DISCLAIMER = "Please consult a doctor for serious advice."

INVALID_QUERY_REPLY = "Missing or invalid query."

NOT_CONFIGURED_REPLY = (
    "AI is not configured at the moment. Please call the pharmacy directly. 📞 "
    + DOCTOR_DISCLAIMER
)

NOT_RESPONDING_REPLY = (
    "AI is currently not responding. Please call the pharmacy directly. 📞 "
    + DOCTOR_DISCLAIMER
)

SAFETY_BLOCK_REPLY = (
    "I cannot answer that question due to safety guidelines. "
    "Please consult a doctor directly. "
    + DOCTOR_DISCLAIMER
)

FALLBACK_REPLY = (
    "Sorry, I'm not sure how to answer that safely. "
    "You can call or visit the store for help. "
    + DOCTOR_DISCLAIMER
)
