def to_snake_case(s: str) -> str:
    out = []
    for prev, c, nxt in zip("x" + s, s, s[1:] + "X"):
        if c.isupper():
            if nxt.isalnum() and nxt.islower():
                out.append("_" + c.lower())
            elif prev.islower():
                out.append("_" + c)
            else:
                out.append(c)
        else:
            out.append(c)

    return "".join(out).strip("_").strip()


def is_blank(v: str | None) -> bool:
    return v is None or not v.strip()
