"""
Project constants definitions
"""

# ============================================================
# Remote Source
# ============================================================

DEFAULT_REPO_URL = "https://github.com/github/awesome-copilot.git"
DEFAULT_BRANCH = "main"
REQUIRED_VCS_TOOL = "git"
TEMP_DIR_PREFIX = "copilot-setup-"

# ============================================================
# Editor
# ============================================================

DEFAULT_CHANNEL = "stable"
MIN_EDITOR_VERSION = "1.104.0"

EDITOR_COMMANDS = {
    "stable": "code",
    "insiders": "code-insiders",
}

EDITOR_PRODUCT_DIRS = {
    "stable": "Code",
    "insiders": "Code - Insiders",
}

SETTINGS_FILE_NAME = "settings.json"
SETTINGS_INDENT = 4

# ============================================================
# Asset Categories
# ============================================================

# "{user}" expands to the editor's per-user configuration root
USER_ROOT_PLACEHOLDER = "{user}"

DEFAULT_CATEGORIES = [
    {
        "name": "agents",
        "source": "agents",
        "destination": "{user}/prompts",
        "files": [
            "plan.agent.md",
            "principal-software-engineer.agent.md",
            "tdd-red.agent.md",
            "tdd-green.agent.md",
            "tdd-refactor.agent.md",
        ],
    },
    {
        "name": "prompts",
        "source": "prompts",
        "destination": "{user}/prompts",
        "files": [
            "create-readme.prompt.md",
            "review-and-refactor.prompt.md",
            "write-coding-standards-from-file.prompt.md",
        ],
    },
    {
        "name": "instructions",
        "source": "instructions",
        "destination": "{user}/prompts",
        "files": [
            "markdown.instructions.md",
            "python.instructions.md",
            "security-and-owasp.instructions.md",
        ],
    },
    {
        "name": "skills",
        "source": "skills",
        "destination": "~/.copilot/skills",
        "folders": [
            "webapp-testing",
            "github-issues",
        ],
    },
]

# ============================================================
# Settings Overrides
# ============================================================

DEFAULT_SETTINGS_OVERRIDES = [
    ("github.copilot.chat.agent.thinkingTool", True),
    ("github.copilot.chat.codeGeneration.useInstructionFiles", True),
    ("chat.agent.maxRequests", 500),
    ("chat.todoListTool.enabled", True),
    ("github.copilot.chat.alternateGptPrompt.enabled", True),
    ("github.copilot.chat.alternateGptPrompt.version", "v2"),
    ("chat.customAgentInSubagent.enabled", True),
    ("github.copilot.chat.anthropic.thinking.budgetTokens", 32000),
    ("chat.useNestedAgentsMdFiles", True),
    ("chat.useSkillAdherencePrompt", True),
]

# ============================================================
# Environment
# ============================================================

ENV_PREFIX = "COPILOT_SETUP_"

# ============================================================
# Hashing
# ============================================================

HASH_CHUNK_SIZE = 8192
