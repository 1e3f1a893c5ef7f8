from typing import List

from darijacode.models import ForumPost, Reply


def seed_posts() -> List[ForumPost]:
    """Example threads shown until the user's own forum state has been saved once."""
    return [
        ForumPost(
            id="post-1",
            author="Youssef",
            content="Salam! I've been learning JavaScript for 3 weeks now and I'm struggling with async/await concepts. Any good resources in Darija that explain this well?",
            timestamp="2 hours ago",
            likes=8,
            replies=[
                Reply(
                    id="reply-1-1",
                    author="AI Assistant",
                    content="Mrhba Youssef! For async/await in Darija, check out DarijaCode's lessons on JavaScript asynchronous programming. I'd recommend starting with promises before moving to async/await. O jreb had video: https://youtu.be/example",
                    timestamp="1 hour ago",
                    likes=5,
                    isAI=True,
                ),
                Reply(
                    id="reply-1-2",
                    author="Fatima",
                    content="Ana kont 3endi nafs lmochkil. Jrebt course dial 'JavaScript Maroc' 3la YouTube, kaycherho async/await mezyan bzaf. Good luck!",
                    timestamp="45 minutes ago",
                    likes=3,
                ),
            ],
            tags=["javascript", "beginner", "question"],
        ),
        ForumPost(
            id="post-2",
            author="Mohamed",
            content="Just completed my first React project! It's a dashboard for tracking water consumption in different regions of Morocco. Learned a lot about hooks and context API.",
            timestamp="1 day ago",
            likes=15,
            replies=[
                Reply(
                    id="reply-2-1",
                    author="Sophia",
                    content="Mabrouk Mohamed! I'm also working with React. Would you mind sharing your GitHub repo? I'd love to see how you implemented the data visualization.",
                    timestamp="20 hours ago",
                    likes=2,
                ),
            ],
            tags=["react", "project", "showcase"],
        ),
        ForumPost(
            id="post-3",
            author="Amina",
            content="Anyone here using TailwindCSS? I'm considering switching from Bootstrap but not sure if it's worth the learning curve. Thoughts?",
            timestamp="3 days ago",
            likes=10,
            replies=[
                Reply(
                    id="reply-3-1",
                    author="AI Assistant",
                    content="Tailwind CSS offers great utility-first approach and is very customizable. The learning curve isn't too steep if you already know CSS. The documentation is excellent too. For Moroccan developers, there's a growing community of Tailwind users in tech meetups in Casablanca and Rabat.",
                    timestamp="3 days ago",
                    likes=6,
                    isAI=True,
                ),
                Reply(
                    id="reply-3-2",
                    author="Karim",
                    content="Ana kanstakhdem Tailwind f projects dyali kolhom. In the beginning ghadi t7ess bli complicated, walkin from my experience, it speeds up development a lot once you get used to it.",
                    timestamp="2 days ago",
                    likes=8,
                ),
            ],
            tags=["css", "tailwind", "question"],
        ),
    ]
