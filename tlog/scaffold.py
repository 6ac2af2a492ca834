"""File templates written by ``tlog init`` and ``tlog new``."""

import datetime
import re
from pathlib import Path
from typing import List, Optional, Tuple

from tlog.site_config import CONFIG_FILE

CONFIG_TEMPLATE = """\
[site]
url = "https://example.com"
title = "My Blog"
slogan = "Welcome to my blog."
description = "A personal blog built with tlog."
bio = "Hello, I'm a developer."
avatar = ""

[social]
github = "https://github.com/your-username"
email = "your-email@example.com"
rss = true

[homepage]
maxPosts = 5
tags = []
excludeTags = []

[features]
techStack = ["Python", "FastAPI"]
googleAnalysis = ""
search = true
"""

HELLO_METADATA_TEMPLATE = """\
[metadata]
title = "Hello World"
description = "My first blog post"
date = {date}
tags = ["hello"]
draft = false
"""

HELLO_BODY = """\
# Hello World

Welcome to my blog! This is your first post.

## Getting Started

Edit this file or create new posts with:

```bash
tlog new my-new-post
```

Then start the dev server:

```bash
tlog dev
```

Build for production:

```bash
tlog build
```

Happy writing!
"""

NEW_POST_METADATA_TEMPLATE = """\
[metadata]
title = "{title}"
description = ""
date = {date}
tags = []
draft = true
"""

NEW_POST_BODY = "Write your content here...\n"

FAVICON_TEMPLATE = """\
<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 64 64">
  <defs>
    <linearGradient id="bgGradient" x1="0" y1="0" x2="1" y2="1">
      <stop offset="0%" stop-color="#ffffff"/>
      <stop offset="100%" stop-color="#f0f0f0"/>
    </linearGradient>
  </defs>
  <rect width="64" height="64" rx="8" fill="url(#bgGradient)"/>
  <text x="50%" y="50%" text-anchor="middle" dominant-baseline="middle" font-size="36" fill="#000000" font-family="Arial, sans-serif" font-weight="900">
    {initial}
  </text>
</svg>
"""


def today(now: Optional[datetime.datetime] = None) -> str:
    now = now or datetime.datetime.now(datetime.timezone.utc)
    return now.date().isoformat()


def title_from_name(name: str) -> str:
    """``my-first-post`` -> ``My First Post``."""
    spaced = name.replace("-", " ")
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), spaced)


def favicon_initial(config_text: str) -> str:
    match = re.search(r'title\s*=\s*"([^"]*)"', config_text)
    if match and match.group(1):
        return match.group(1)[0].upper()
    return "Z"


def init_files(date: str) -> List[Tuple[str, str]]:
    """Relative path and content of every file ``tlog init`` creates."""
    return [
        (CONFIG_FILE, CONFIG_TEMPLATE),
        ("hello-world.toml", HELLO_METADATA_TEMPLATE.format(date=date)),
        ("hello-world.md", HELLO_BODY),
        (
            ".public/favicon.svg",
            FAVICON_TEMPLATE.format(initial=favicon_initial(CONFIG_TEMPLATE)),
        ),
    ]


def new_post_files(name: str, date: str) -> List[Tuple[str, str]]:
    return [
        (f"{name}.toml", NEW_POST_METADATA_TEMPLATE.format(title=title_from_name(name), date=date)),
        (f"{name}.md", NEW_POST_BODY),
    ]


def write_if_missing(base: Path, relative: str, content: str) -> bool:
    """Write ``content`` unless the file exists; returns True when written."""
    path = base / relative
    if path.exists():
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return True
