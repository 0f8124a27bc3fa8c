"""Redaction of sensitive values for logs and error messages."""


def redact(sensitive: str) -> str:
    """Hide most of a sensitive string.

    Strings of one or two characters become "**", three to five characters
    keep their first character, longer ones keep their first three.
    """
    if not sensitive:
        return ""
    if len(sensitive) <= 2:
        return "**"
    if len(sensitive) <= 5:
        return sensitive[0] + "****"
    return sensitive[:3] + "****"


def redact_email(email: str) -> str:
    """Redact the local part of an e-mail address, keeping the domain.

    Anything that is not exactly one local part and one domain is redacted
    as a whole.
    """
    if not email:
        return ""
    parts = email.split("@")
    if len(parts) != 2:
        return redact(email)
    local, domain = parts
    return f"{redact(local)}@{domain}"