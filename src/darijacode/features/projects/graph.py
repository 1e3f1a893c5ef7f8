import logging
from typing import Optional, TypedDict

from langchain_core.runnables import RunnableConfig
from langgraph.graph import END, StateGraph

from darijacode.assistant.errors import AssistantError, DecodeFailure
from darijacode.assistant.extraction import decode_payload, extract_candidate
from darijacode.assistant.mutators import prepend_item
from darijacode.assistant.prompts import (
    FLOWCHART_REQUEST,
    FLOWCHART_SYSTEM,
    PROJECT_IDEA_REQUEST,
    PROJECT_IDEA_SYSTEM,
)
from darijacode.assistant.validation import validate_project_idea
from darijacode.models import ProjectIdea

logger = logging.getLogger(__name__)

GENERATION_ERROR = "An error occurred while generating the project. Please check your API key and try again."


# stateGraphe
class ProjectGraphState(TypedDict):
    description: str
    project: Optional[ProjectIdea]
    flowchart: Optional[str]
    error: Optional[str]


# node
async def generate_idea_node(state: ProjectGraphState, config: RunnableConfig) -> dict:
    """
    Asks for a project idea, validates it and commits it at the top of the project list.
    A malformed answer still gives a default idea built from the user's description.
    """
    client = config["configurable"]["client"]
    projects = config["configurable"]["projects"]
    description = state["description"]

    try:
        answer = await client.complete(
            PROJECT_IDEA_SYSTEM,
            PROJECT_IDEA_REQUEST.format(description=description),
            max_tokens=1024,
            temperature=0.7,
        )
    except AssistantError as e:
        logger.error(f"Error generating project: {e}")
        return {"error": GENERATION_ERROR}

    try:
        raw = decode_payload(answer)
    except DecodeFailure as e:
        logger.warning(f"Error parsing project JSON, using a default idea: {e}")
        raw = {}

    project = validate_project_idea(raw, description)
    projects.update(lambda current: prepend_item(current, project))
    return {"project": project}


# node
async def generate_flowchart_node(state: ProjectGraphState, config: RunnableConfig) -> dict:
    """Mermaid flowchart for the idea just committed. Failing here never undoes the idea."""
    client = config["configurable"]["client"]
    project = state["project"]

    try:
        answer = await client.complete(
            FLOWCHART_SYSTEM,
            FLOWCHART_REQUEST.format(title=project.title, description=project.description),
            max_tokens=1024,
            temperature=0.3,
        )
    except AssistantError as e:
        logger.error(f"Error generating flowchart: {e}")
        return {"flowchart": None}

    flowchart = extract_candidate(answer, language="mermaid")
    return {"flowchart": flowchart or None}


def route_after_idea(state: ProjectGraphState) -> str:
    return "flowchart" if state.get("project") is not None else "end"


def get_project_generation_graph():
    """idea -> flowchart, the flowchart step only runs when an idea was committed."""
    workflow = StateGraph(ProjectGraphState)
    workflow.add_node("generate_idea", generate_idea_node)
    workflow.add_node("generate_flowchart", generate_flowchart_node)
    workflow.set_entry_point("generate_idea")
    workflow.add_conditional_edges(
        "generate_idea",
        route_after_idea,
        {"flowchart": "generate_flowchart", "end": END},
    )
    workflow.add_edge("generate_flowchart", END)
    return workflow.compile()
