from github import Auth, Github
from github.Repository import Repository

from .config import PAGE_SIZE


#Thin wrapper over a PyGithub repository exposing the label calls we need.
class GitHubLabelClient:

    def __init__(self, repo: Repository, full_name: str):
        self.repo = repo
        self.full_name = full_name

    def list_labels_on_item(self, item_number: int) -> set[str]:
        # issues and pull requests share the issues label endpoints
        issue = self.repo.get_issue(item_number)
        return {label.name for label in issue.get_labels()}

    def list_labels_on_repo(self) -> set[str]:
        # PaginatedList follows the Link headers, per_page labels per request
        return {label.name for label in self.repo.get_labels()}

    def create_label(self, name: str, color: str) -> None:
        # the REST API wants the bare hex value
        self.repo.create_label(name=name, color=color.lstrip("#"))

    def add_labels_to_item(self, item_number: int, names: list[str]) -> None:
        issue = self.repo.get_issue(item_number)
        issue.add_to_labels(*names)


#Create the GitHub client once per run; it is passed to everything that talks to GitHub.
def make_github_client(token: str, repository: str, page_size: int = PAGE_SIZE) -> GitHubLabelClient:

    # retry=None: one attempt per call, failures go straight back to the caller
    gh = Github(auth=Auth.Token(token), per_page=page_size, retry=None, lazy=True)
    repo = gh.get_repo(repository)
    return GitHubLabelClient(repo, repository)
