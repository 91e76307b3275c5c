from .client import GitHubClient
from .inputs import parse_repo_input, try_parse_repo_input
from .refs import DEFAULT_BRANCH_CANDIDATES

__all__ = [
    "DEFAULT_BRANCH_CANDIDATES",
    "GitHubClient",
    "parse_repo_input",
    "try_parse_repo_input",
]
