"""Constants shared across Launchpad modules."""

from __future__ import annotations

# =============================================================================
# Provisioning
# =============================================================================

#: README file whose variables are substituted before the initial push
README_FILENAME: str = "README.adoc"

#: Variable holding the authenticated GitHub login in the README
LOGGED_USER_VARIABLE: str = "loggedUser"

#: GitHub events the deployment webhooks subscribe to
WEBHOOK_EVENTS: tuple[str, ...] = ("push", "pull_request", "issue_comment")

# =============================================================================
# GitHub defaults
# =============================================================================

#: Commit message used for the initial push of generated content
DEFAULT_COMMIT_MESSAGE: str = "Initial import"

DEFAULT_BRANCH: str = "main"

DEFAULT_GITHUB_API_URL: str = "https://api.github.com"

# =============================================================================
# Catalog
# =============================================================================

#: Metadata key in a booster declaring the cluster types it runs on
RUNS_ON_METADATA_KEY: str = "runsOn"
