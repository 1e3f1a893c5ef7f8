from typing import List

from darijacode.models import LearningTopic

CATEGORIES = {
    "all": "All",
    "web": "Web Development",
    "programming": "Programming",
    "database": "Databases",
    "tools": "Tools",
}

TOPICS: List[LearningTopic] = [
    LearningTopic(id="html-basics", title="HTML Basics",
                  description="Learn the fundamentals of HTML to create web pages.",
                  category="web", tags=["html", "beginner"], language="en"),
    LearningTopic(id="css-styling", title="CSS Styling",
                  description="Learn how to style your web pages with CSS.",
                  category="web", tags=["css", "beginner"], language="en"),
    LearningTopic(id="javascript-intro", title="JavaScript Introduction",
                  description="Get started with JavaScript programming.",
                  category="web", tags=["javascript", "beginner"], language="en"),
    LearningTopic(id="python-basics", title="Python Basics",
                  description="Start your Python programming journey.",
                  category="programming", tags=["python", "beginner"], language="en"),
    LearningTopic(id="react-intro", title="React Introduction",
                  description="Learn the basics of React library for building user interfaces.",
                  category="web", tags=["react", "javascript", "intermediate"], language="en"),
    LearningTopic(id="git-basics", title="Git Basics",
                  description="Master the essential Git commands for version control.",
                  category="tools", tags=["git", "beginner"], language="en"),
    LearningTopic(id="database-intro", title="Database Introduction",
                  description="Understand the basics of databases and SQL.",
                  category="database", tags=["sql", "database", "beginner"], language="en"),
    LearningTopic(id="html-basics-fr", title="Bases de HTML",
                  description="Apprendre les fondamentaux de HTML pour créer des pages web.",
                  category="web", tags=["html", "beginner"], language="fr"),
    LearningTopic(id="python-basics-ar", title="أساسيات بايثون",
                  description="ابدأ رحلتك في برمجة بايثون.",
                  category="programming", tags=["python", "beginner"], language="ar"),
    LearningTopic(id="javascript-intro-darija", title="Mouqadima JavaScript",
                  description="Bda t3llem JavaScript mn louwel.",
                  category="web", tags=["javascript", "beginner"], language="darija"),
]
