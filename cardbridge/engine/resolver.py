"""Name resolution against the Basecamp directory.

Assignee fragments and project names are matched case-insensitively:
a user matches when their full name contains the fragment or one of their
name tokens equals it. The first match wins; misses are logged and skipped.
"""

import logging
from typing import Dict, List, Optional, Sequence

from cardbridge.engine.parser import split_assignee_names
from cardbridge.models.constants import PROJECT_TO_LIST_ID
from cardbridge.models.directory import BasecampId, DirectoryProject, DirectoryUser
from cardbridge.models.task import RoutingTarget

logger = logging.getLogger(__name__)


def _user_matches(user: DirectoryUser, fragment: str) -> bool:
    user_name = user.name.lower()
    return fragment in user_name or fragment in user_name.split()


def find_user(fragment: str, users: Sequence[DirectoryUser]) -> Optional[DirectoryUser]:
    low = fragment.strip().lower()
    if not low:
        return None
    for user in users:
        if _user_matches(user, low):
            return user
    return None


def resolve_assignee_ids(
    assignee_names: Optional[str], users: Sequence[DirectoryUser]
) -> List[BasecampId]:
    """Map a raw comma-separated assignee string to Basecamp person ids.

    Returns ids in input order; may be shorter than the fragment list.
    """
    assignee_ids: List[BasecampId] = []
    for fragment in split_assignee_names(assignee_names):
        match = find_user(fragment, users)
        if match:
            assignee_ids.append(match.id)
            logger.info(f"Found assignee for '{fragment}': {match.name} ({match.id})")
        else:
            logger.warning(f"No matching assignee found for '{fragment}'")
    return assignee_ids


def find_project(
    project_name: str, projects: Sequence[DirectoryProject]
) -> Optional[DirectoryProject]:
    low = project_name.strip().lower()
    if not low:
        return None
    for project in projects:
        if low in project.name.lower():
            return project
    return None


def resolve_routing(
    project_name: Optional[str],
    projects: Sequence[DirectoryProject],
    *,
    default_project_id: BasecampId,
    default_list_id: BasecampId,
    project_lists: Optional[Dict[str, BasecampId]] = None,
) -> RoutingTarget:
    """Choose the project and card table list a card should be created in.

    A project is only switched to when it also has a mapped list id;
    otherwise the defaults are used.
    """
    default = RoutingTarget(project_id=default_project_id, list_id=default_list_id)
    if not project_name:
        return default

    if project_lists is None:
        project_lists = PROJECT_TO_LIST_ID

    match = find_project(project_name, projects)
    if match is None:
        logger.warning(f"No matching project for '{project_name}'. Using default project {default_project_id}.")
        return default

    logger.info(f"Found matching project for '{project_name}': {match.name} ({match.id})")
    mapped_list_id = project_lists.get(match.name.lower())
    if mapped_list_id is None:
        logger.warning(f"No list id mapped for project '{match.name}'. Using default list {default_list_id}.")
        return default

    logger.info(f"Using mapped list {mapped_list_id} for project '{match.name}'")
    return RoutingTarget(project_id=match.id, list_id=mapped_list_id)
