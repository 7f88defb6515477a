# app/core/validators.py
from datetime import date
from typing import List, Optional, Union
from urllib.parse import urlsplit, urlunsplit

DEFAULT_PORTS = {"http": 80, "https": 443}


def normalize_url(url: Optional[str]) -> str:
    """
    Rewrite a user supplied link into an absolute https URL.

    ``"example.com"`` -> ``"https://example.com"``. Empty input stays empty.
    The host is lower-cased, a leading ``www.`` and default ports are removed,
    and so are a trailing slash and the fragment.
    """
    if url is None:
        return ""
    url = url.strip()
    if not url:
        return ""

    if url.startswith("//"):
        url = "https:" + url
    elif "://" not in url:
        url = "https://" + url

    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    if scheme == "http":
        scheme = "https"

    try:
        port = parts.port
    except ValueError:
        return url

    host = (parts.hostname or "").lower()
    if host.startswith("www.") and "." in host[4:]:
        host = host[4:]

    # IPv6 literals lose their brackets in hostname
    netloc = f"[{host}]" if ":" in host else host
    if port and port not in (DEFAULT_PORTS.get(parts.scheme.lower()), DEFAULT_PORTS.get(scheme)):
        netloc = f"{netloc}:{port}"
    if parts.username:
        userinfo = parts.username
        if parts.password:
            userinfo = f"{userinfo}:{parts.password}"
        netloc = f"{userinfo}@{netloc}"

    path = parts.path.rstrip("/")

    return urlunsplit((scheme, netloc, path, parts.query, ""))


def normalize_skills(skills: Union[str, List[str], None]) -> List[str]:
    """Split a comma separated string (or clean a list) into trimmed tags"""
    if skills is None:
        return []
    if isinstance(skills, str):
        skills = skills.split(",")
    return [skill.strip() for skill in skills if skill and skill.strip()]


def validate_date_range(from_date: date, to_date: Optional[date], current: bool) -> None:
    """Ongoing entries have no end date; an end date never precedes the start"""
    if current and to_date is not None:
        raise ValueError("A current entry cannot have a to date")
    if to_date is not None and to_date < from_date:
        raise ValueError("To date must not be earlier than from date")
