"""Application constants: version, banner and OpenAPI description."""

import base64

OPENAPI_TITLE = "gfastkit"
OPENAPI_DESCRIPTION = "后台管理系统。 Enjoy 💖 "
OPENAPI_CONTACT_NAME = "gfastkit"
OPENAPI_CONTACT_URL = "https://example.com"

LOGO = (
    "CiAgIF9fX19fX19fX19fXyAgICAgICAgICAgX18gCiAgLyBfX19fLyBfX19fL19fXyBfX19fX18vIC9f"
    "CiAvIC8gX18vIC9fICAvIF9fIGAvIF9fXy8gX18vCi8gL18vIC8gX18vIC8gL18vIChfXyAgKSAvXyAg"
    "ClxfX19fL18vICAgIFxfXyxfL19fX18vXF9fLyAg"
)
VERSION = "3.2.4"


def logo_text() -> str:
    """Return the decoded start-up banner."""
    return base64.b64decode(LOGO).decode("utf-8")


def openapi_info() -> dict:
    """Return the OpenAPI ``info`` object describing the service."""
    return {
        "title": OPENAPI_TITLE,
        "description": OPENAPI_DESCRIPTION,
        "contact": {"name": OPENAPI_CONTACT_NAME, "url": OPENAPI_CONTACT_URL},
    }