"""Files every session starts with."""

ABOUT_TXT = """Jayesh Channe
Software Engineer

Email: jayeshchanne9@gmail.com
LinkedIn: linkedin.com/in/jayeshchanne
GitHub: github.com/Jayesh242663

Professional Summary
Results-driven software engineer with 3+ years of learning experience in developing scalable web and desktop applications. Strong background in full-stack development, data structures, and system design. Comfortable collaborating across teams to deliver user-centric, high-quality solutions.

Education
- Vidya Niketan - SSC (2008 - 2020)
- Royal Junior College - HSC in Science (2020 - 2022)
- Mumbai University - BS in Information Technology (2022 - 2027)

Skills
- Programming: Python, JavaScript, C, Java
- Web: HTML, CSS, React, Node.js, Express.js
- Tools: Git, GitHub, Wireshark, Burp Suite
- Databases: MySQL, MongoDB, PostgreSQL
"""

PROJECT_TXT = """Retro Portfolio Terminal

This is a retro CRT-styled portfolio website. It simulates an old-school computer terminal with realistic CRT effects including scanlines, screen curvature, and phosphor glow.

Features:
- Interactive terminal with Linux-like commands
- Realistic CRT monitor visual effects
- In-memory virtual file system
- Nvim-style text editor
- Multiple color themes (amber/green)
- Retro boot sequence animation

Technologies Used:
- Python terminal server speaking MCP
- CSS animations for CRT effects
- Web Audio API for sound effects

Commands: Type 'help' for available commands.
"""

README_TXT = """Retro Portfolio Terminal

Welcome to my retro-styled portfolio!

Commands:
- help     - Show available commands
- about    - Display info about me
- projects - List my projects
- contact  - Get contact info
- theme    - Toggle amber/green theme
- ls       - List files
- cat      - Read file contents

Explore the terminal to learn more about me and my work!
"""

RESUME_TXT = """Jayesh Channe

Email: jayeshchanne9@gmail.com
LinkedIn: linkedin.com/in/jayeshchanne
GitHub: github.com/Jayesh242663

---

Professional Summary

Results-driven software engineer with 3+ years of learning experience in developing scalable web and desktop applications. Strong background in full-stack development, data structures, and system design. Comfortable collaborating across teams to deliver user-centric, high-quality solutions.

Education

- Vidya Niketan - SSC (2008 - 2020)
- Royal Junior College - HSC in Science (2020 - 2022)
- Mumbai University - BS in Information Technology (2022 - 2027)

Skills

- Programming Languages: Python, JavaScript, C, Java
- Web Development: HTML, CSS, React, Node.js, Express.js
- Tools & Technologies: Git, GitHub, Wireshark, Burp Suite
- Databases: MySQL, MongoDB, PostgreSQL
- Soft Skills: Teamwork, Communication, Problem-Solving, Time Management

Projects

Bank Management System
Simulates fundamental banking operations, allowing users to manage accounts, perform transactions, and view account details. Initially developed in Java, later rebuilt in Python with MySQL integration.
Tools: Python, MySQL

Workspace Management System
Platform to manage employee information, assign tasks, and track project progress to improve team productivity.
Tools: Python, MySQL

Secure Pass (Under Development)
Web application to securely store passwords, perform security diagnostics, and monitor data breaches with real-time alerts.
Tools: React, Python, PostgreSQL

Certifications

- 100 Days of Code: The Complete Python Pro Boot Camp - Udemy
- The Complete 2024 Web Development Boot Camp - Udemy
"""

DEFAULT_FILES: dict[str, str] = {
    "~/about.txt": ABOUT_TXT,
    "~/project.txt": PROJECT_TXT,
    "~/readme.txt": README_TXT,
    "~/resume.txt": RESUME_TXT,
}
