# utils/formatting.py

META_SEPARATOR = " · "


def join_present(*parts, sep: str = META_SEPARATOR) -> str:
    """Join the non-empty parts with sep; missing parts leave no separator behind."""
    return sep.join(p for p in parts if p)
