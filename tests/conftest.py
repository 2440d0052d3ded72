import httpx
import pytest

from core.cache import TTLCache
from core.config import Settings
from core.registry import RegistryClient

BASE_URL = "https://registry.test/registry/react"
SITE_URL = "https://docs.test"


def summary(name, title, description, categories, featured):
    return {
        "name": name,
        "title": title,
        "description": description,
        "type": "registry:ui",
        "categories": categories,
        "featured": featured,
        "url": f"{BASE_URL}/{name}.json",
    }


def make_index(components, categories, meta=None):
    index = {
        "$schema": "https://brutalist.precast.dev/schema/registry.json",
        "name": "brutalist-ui",
        "description": "Bold, unapologetic React components",
        "version": "1.0.0",
        "framework": "react",
        "baseUrl": BASE_URL,
        "components": components,
        "categories": {
            key: {"title": key.title(), "description": f"{key.title()} components"}
            for key in categories
        },
    }
    if meta is not None:
        index["meta"] = meta
    return index


# Five components; exactly one ("button") is in "action", featured, and
# contains "but".
INDEX = make_index(
    [
        summary("button", "Button", "A clickable button for user actions", ["action"], True),
        summary("toggle-button", "Toggle Button", "A button that toggles between two states", ["action"], False),
        summary("card", "Card", "Container that can hold a button row", ["display"], True),
        summary("link", "Link", "Navigational anchor element", ["action", "navigation"], True),
        summary("textarea", "Textarea", "Multi-line text input", ["forms"], False),
    ],
    ["action", "display", "forms", "navigation", "feedback"],
    meta={"lastUpdated": "2025-01-15", "totalComponents": 5, "maintainer": "Buun Group"},
)

BUTTON_DETAIL = {
    "name": "button",
    "title": "Button",
    "version": "1.2.0",
    "description": "A clickable button for user actions",
    "license": "MIT",
    "brutalistFeatures": {"hasThickBorders": True, "hasShadows": True, "theme": "classic"},
    "categories": ["action"],
    "dependencies": {"clsx": "^2.0.0"},
    "files": [
        {"path": "components/ui/button/Button.tsx", "type": "registry:ui", "content": "export const Button = () => null"},
        {"path": "components/ui/button/Button.module.css", "content": ".button { border: 3px solid; }"},
        {"path": "components/ui/button/button-example.tsx", "content": "<Button>Go</Button>"},
    ],
}

CARD_DETAIL = {
    "name": "card",
    "title": "Card",
    "version": "1.0.0",
    "description": "Container that can hold a button row",
    "dependencies": ["react"],
    "files": [
        {"name": "Card.scss", "content": ".card {}"},
        {"name": "Card.tsx", "content": "export const Card = () => null"},
    ],
}

BROKEN_DETAIL = {
    "name": "broken",
    "version": "1.0.0",
    "description": "A file with neither path nor name",
    "files": [{"content": "oops"}],
}


class FakeClock:
    """A controllable stand-in for time.monotonic."""

    def __init__(self, start=1_000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class RegistryStub:
    """httpx.MockTransport handler serving registry documents by file name.

    Values may be JSON-able dicts (served with 200) or prepared
    httpx.Response objects.  Unknown names get a 404.  Every requested path
    is recorded in ``requests``.
    """

    def __init__(self, documents):
        self.documents = documents
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request.url.path)
        name = request.url.path.rsplit("/", 1)[-1]
        document = self.documents.get(name)
        if document is None:
            return httpx.Response(404, json={"error": "Not found"})
        if isinstance(document, httpx.Response):
            return document
        return httpx.Response(200, json=document)

    def count(self, name):
        return sum(1 for path in self.requests if path.endswith(f"/{name}"))


def make_client(stub, clock=None):
    cache = TTLCache(clock=clock) if clock is not None else TTLCache()
    return RegistryClient(BASE_URL, cache=cache, transport=httpx.MockTransport(stub))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def registry_stub():
    return RegistryStub({
        "index.json": INDEX,
        "button.json": BUTTON_DETAIL,
        "card.json": CARD_DETAIL,
        "broken.json": BROKEN_DETAIL,
        "garbage.json": httpx.Response(200, text="<html>not json</html>"),
        "flaky.json": httpx.Response(500, text="Internal Server Error"),
    })


@pytest.fixture
def client(registry_stub, clock):
    return make_client(registry_stub, clock)


@pytest.fixture
def settings():
    return Settings(registry_base_url=BASE_URL, site_url=SITE_URL, docs_root=None)
