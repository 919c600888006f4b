"""Built-in tag catalog, keyed by tag group."""

from .Tag import Tag

_YOR_TRACE = Tag(
    key="yor_trace",
    description="A UUID tag that allows tracing the IaC code to the resource created by it",
)

DEFAULT_TAG_GROUPS: dict[str, list[Tag]] = {
    "code2cloud": [_YOR_TRACE],
    "git": [
        Tag(key="git_commit", description="The commit hash where this resource was last changed in IaC"),
        Tag(key="git_file", description="The file (including path) in the repository where this resource is provisioned in IaC"),
        Tag(key="git_last_modified_at", description="The last time this resource's IaC was modified"),
        Tag(key="git_last_modified_by", description="The last user who modified this resource's IaC"),
        Tag(key="git_modifiers", description="The users who modified this resource's IaC"),
        Tag(key="git_org", description="The entity which owns the repository where this resource is provisioned in IaC"),
        Tag(key="git_repo", description="The name of the repository where this resource is provisioned in IaC"),
    ],
    "simple": [
        _YOR_TRACE,
        Tag(key="yor_name", description="The name of the resource as it is defined in IaC"),
    ],
}
