def group_thousands(text: str) -> str:
    """
    Add thousands separators to the integer part of a raw numeral.

    Sign and fractional digits are kept exactly as typed, so "-1234." renders as
    "-1,234." while the user is still entering decimals. Anything that is not a
    plain numeral (the "∞" and "NaN" readouts) is returned unchanged.
    """
    sign = ""
    body = text
    if body.startswith("-"):
        sign, body = "-", body[1:]

    integer, dot, fraction = body.partition(".")
    if not integer.isdigit() or (fraction and not fraction.isdigit()):
        return text

    return f"{sign}{int(integer):,}{dot}{fraction}"
