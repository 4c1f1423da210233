from __future__ import annotations

from pathlib import Path

import pytest

from tests.utils import write_tree


@pytest.fixture()
def asset_repo(tmp_path: Path) -> Path:
    return write_tree(
        tmp_path / "assets",
        {
            "agents/a.md": "X",
            "agents/b.md": "Y",
            "prompts/review.prompt.md": "review",
            "skills/pdf/SKILL.md": "pdf skill",
            "skills/pdf/scripts/run.py": "print('hi')\n",
            "skills/web/SKILL.md": "web skill",
        },
    )
