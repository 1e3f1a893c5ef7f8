import logging
from typing import List, Optional

from darijacode.assistant.completion import CompletionClient
from darijacode.assistant.errors import AssistantError
from darijacode.assistant.mutators import toggle_saved
from darijacode.assistant.prompts import PROJECT_DETAILS_REQUEST, PROJECT_DETAILS_SYSTEM
from darijacode.db.store import PROJECT_IDEAS_KEY, KeyValueStore, PersistentValue
from darijacode.models import ProjectIdea, ProjectOutcome

from .graph import get_project_generation_graph
from .seed import seed_projects

logger = logging.getLogger(__name__)

EMPTY_DESCRIPTION_ERROR = "Please enter a project description"
EMPTY_DETAILS = "Sorry, I couldn't generate details for this project."
ERROR_DETAILS = (
    "Sorry, there was an error generating the project details. Please make sure your API key is set up correctly."
)


class ProjectService:
    def __init__(self, client: CompletionClient, store: Optional[KeyValueStore]):
        self.client = client
        self.projects = PersistentValue(store, PROJECT_IDEAS_KEY, List[ProjectIdea], seed_projects)
        # flowchart of the most recently generated idea, never persisted
        self.latest_flowchart: Optional[str] = None
        self._graph = get_project_generation_graph()

    def get_project(self, project_id: str) -> Optional[ProjectIdea]:
        return next((p for p in self.projects.value if p.id == project_id), None)

    def all_tags(self) -> List[str]:
        return list(dict.fromkeys(tag for project in self.projects.value for tag in project.tags))

    def filter_projects(self, search: str = "", difficulty: str = "all", tag: str = "all") -> List[ProjectIdea]:
        term = search.lower()
        return [
            project for project in self.projects.value
            if (term in project.title.lower() or term in project.description.lower())
            and (difficulty == "all" or project.difficulty == difficulty)
            and (tag == "all" or tag in project.tags)
        ]

    def toggle_saved(self, project_id: str) -> List[ProjectIdea]:
        return self.projects.update(lambda current: toggle_saved(current, project_id))

    async def fetch_details(self, project_id: str) -> Optional[str]:
        """Markdown implementation guide for one idea. None for an unknown id."""
        project = self.get_project(project_id)
        if project is None:
            return None
        try:
            content = await self.client.complete(
                PROJECT_DETAILS_SYSTEM,
                PROJECT_DETAILS_REQUEST.format(title=project.title, description=project.description),
                max_tokens=2048,
                temperature=0.5,
            )
        except AssistantError as e:
            logger.error(f"Error fetching project details for {project_id}: {e}")
            return ERROR_DETAILS
        return content or EMPTY_DETAILS

    async def generate(self, description: str) -> ProjectOutcome:
        """
        Generates a new idea from a free-text description, commits it, then
        asks for its flowchart.
        """
        if not description or not description.strip():
            return ProjectOutcome(error=EMPTY_DESCRIPTION_ERROR)

        self.latest_flowchart = None
        result = await self._graph.ainvoke(
            {"description": description, "project": None, "flowchart": None, "error": None},
            config={"configurable": {"client": self.client, "projects": self.projects}},
        )
        self.latest_flowchart = result.get("flowchart")
        return ProjectOutcome(
            project=result.get("project"),
            flowchart=result.get("flowchart"),
            error=result.get("error"),
        )
