import re


def parse_messages_to_str(messages):
    res = ""
    for msg in messages:
        res += "role={}\n".format(msg.get("role"))
        res += msg.get("content") or ""
        res += "\n"
    return res


def split_advice_lines(text):
    """Turn a free-form reply into advice lines, dropping bullets and blanks"""
    lines = []
    for raw in (text or "").splitlines():
        line = re.sub(r"^\s*(?:[-*・•]|\d+[.)．])\s*", "", raw).strip()
        if line:
            lines.append(line)
    return lines
