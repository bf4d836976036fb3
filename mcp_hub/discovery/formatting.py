import re


def to_title_case(value: str) -> str:
    """getCustomerByEmail -> Get Customer By Email, send-invoice -> Send Invoice"""
    if not value:
        return ""
    value = value.replace("-", " ")
    value = re.sub(r"([A-Z])", r" \1", value)
    value = value[:1].upper() + value[1:]
    value = re.sub(r"\s+", " ", value.strip())
    return re.sub(r"\b[a-z]", lambda match: match.group(0).upper(), value)
