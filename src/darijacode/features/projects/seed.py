from typing import List

from darijacode.models import ProjectIdea


def seed_projects() -> List[ProjectIdea]:
    return [
        ProjectIdea(
            id="project-1",
            title="Weather Dashboard App",
            description="Build a responsive weather dashboard that displays current weather and forecasts for multiple cities using a weather API.",
            difficulty="beginner",
            tags=["frontend", "api"],
            savedToLibrary=True,
        ),
        ProjectIdea(
            id="project-2",
            title="Personal Task Manager",
            description="Create a task management application with features like task creation, priority setting, due dates, and status tracking.",
            difficulty="beginner",
            tags=["frontend", "javascript"],
        ),
        ProjectIdea(
            id="project-3",
            title="Recipe Sharing Platform",
            description="Develop a platform where users can share Moroccan recipes, rate others' recipes, and filter by categories.",
            difficulty="intermediate",
            tags=["fullstack", "database"],
        ),
        ProjectIdea(
            id="project-4",
            title="E-commerce Product Page",
            description="Build a responsive product page with image gallery, product description, pricing, and add-to-cart functionality.",
            difficulty="beginner",
            tags=["frontend", "css"],
            savedToLibrary=True,
        ),
        ProjectIdea(
            id="project-5",
            title="Markdown Blog Engine",
            description="Create a simple blog engine that renders Markdown content, with tag filtering and search functionality.",
            difficulty="intermediate",
            tags=["frontend", "javascript"],
        ),
        ProjectIdea(
            id="project-6",
            title="Real-time Chat Application",
            description="Build a real-time chat application with private messaging, group chats, and online status indicators.",
            difficulty="advanced",
            tags=["fullstack", "websocket"],
        ),
    ]
