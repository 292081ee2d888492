"""Portfolio data and the texts generated from it."""

from typing import Any

PORTFOLIO: dict[str, Any] = {
    "name": "Jayesh Channe",
    "title": "Software Engineer",
    "email": "jayeshchanne9@gmail.com",
    "github": "https://github.com/Jayesh242663",
    "linkedin": "https://linkedin.com/in/jayeshchanne",
    "location": "Mumbai, India",
    "about": (
        "Results-driven software engineer with 3+ years of learning experience in developing scalable web "
        "and desktop applications. Strong background in full-stack development, data structures, and system "
        "design. I collaborate across teams to deliver user-centric, high-quality solutions."
    ),
    "skills": {
        "languages": ["Python", "JavaScript", "C", "Java"],
        "frontend": ["React", "HTML", "CSS"],
        "backend": ["Node.js", "Express.js"],
        "databases": ["MySQL", "MongoDB", "PostgreSQL"],
        "tools": ["Git", "GitHub", "Wireshark", "Burp Suite"],
        "soft": ["Teamwork", "Communication", "Problem-Solving", "Time Management"],
    },
    "projects": [
        {
            "name": "Bank Management System",
            "description": (
                "Simulates core banking operations with account management and transactions; "
                "originally Java, rebuilt in Python with MySQL integration."
            ),
            "tech": ["Python", "MySQL"],
            "link": "https://github.com/Jayesh242663/bank-management-system",
        },
        {
            "name": "Workspace Management System",
            "description": "Platform to manage employees, tasks and project progress to improve productivity and transparency.",
            "tech": ["Python", "MySQL"],
            "link": "https://github.com/Jayesh242663/workspace-management-system",
        },
        {
            "name": "Secure Pass",
            "description": (
                "A web app for secure password storage, security diagnostics and breach monitoring. "
                "(Under development)"
            ),
            "tech": ["React", "Python", "PostgreSQL"],
            "link": "https://github.com/Jayesh242663/secure-pass",
        },
    ],
    "experience": [
        {
            "role": "Software Engineer",
            "company": "Independent / Personal Projects",
            "period": "2021 - Present",
            "description": "Designing and building full-stack applications, focused on web and desktop tooling.",
        },
    ],
}


def _bullets(items: list[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def generate_about(data: dict[str, Any] = PORTFOLIO) -> str:
    return f"Name: {data['name']}\nRole: {data['title']}\nLocation: {data['location']}\n\n{data['about']}"


def generate_skills(data: dict[str, Any] = PORTFOLIO) -> str:
    skills = data["skills"]
    sections = [
        ("Languages", skills["languages"]),
        ("Frontend", skills["frontend"]),
        ("Backend", skills["backend"]),
        ("Databases", skills["databases"]),
        ("Tools & Platforms", skills["tools"]),
    ]
    return "\n\n".join(f"{title}:\n{_bullets(items)}" for title, items in sections)


def generate_projects(data: dict[str, Any] = PORTFOLIO) -> str:
    blocks = []
    for index, project in enumerate(data["projects"], start=1):
        block = f"{index}. {project['name']}\n  {project['description']}\n  Tech: {', '.join(project['tech'])}"
        if project.get("link"):
            block += f"\n  Link: {project['link']}"
        blocks.append(block)
    return "My Projects:\n\n" + "\n\n".join(blocks)


def generate_contact(data: dict[str, Any] = PORTFOLIO) -> str:
    return (
        "Contact Information:\n"
        f"Email: {data['email']}\n"
        f"GitHub: {data['github']}\n"
        f"LinkedIn: {data['linkedin']}\n"
        f"Location: {data['location']}"
    )


def generate_experience(data: dict[str, Any] = PORTFOLIO) -> str:
    entries = [
        f"{e['role']} @ {e['company']}\n{e['period']}\n{e['description']}" for e in data["experience"]
    ]
    return "Work Experience:\n\n" + "\n\n".join(entries)


def find_project(name: str, data: dict[str, Any] = PORTFOLIO) -> dict[str, Any] | None:
    """Looks a project up by its full name, case-insensitively."""
    wanted = name.strip().lower()
    for project in data["projects"]:
        if project["name"].lower() == wanted:
            return project
    return None


def generate_project_card(project: dict[str, Any]) -> str:
    border = "=" * 48
    title = f"PROJECT: {project['name'].upper()}"
    tech = "\n".join(f"  > {t}" for t in project["tech"])
    card = (
        f"+{border}+\n"
        f"|  {title:<46}|\n"
        f"+{border}+\n\n"
        f"Description:\n  {project['description']}\n\n"
        f"Technologies:\n{tech}"
    )
    if project.get("link"):
        card += f"\n\nRepository:\n  {project['link']}"
    return card
