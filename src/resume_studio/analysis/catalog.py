"""Fixed message catalog for heuristic resume suggestions.

Keyed by (section, condition). The analyzers only decide *which* entries
apply; wording lives here.
"""

from __future__ import annotations

from enum import Enum

from resume_studio.models.suggestion import Priority, Suggestion, SuggestionSection


class Condition(str, Enum):
    SUMMARY_TOO_BRIEF = "summary_too_brief"
    SUMMARY_SHORT = "summary_short"
    SUMMARY_NO_ACTION_WORDS = "summary_no_action_words"
    EXPERIENCE_EMPTY = "experience_empty"
    EXPERIENCE_NOT_QUANTIFIED = "experience_not_quantified"
    EXPERIENCE_NO_ACTION_VERBS = "experience_no_action_verbs"
    SKILLS_EMPTY = "skills_empty"
    SKILLS_TOO_FEW = "skills_too_few"
    SKILLS_TOO_MANY = "skills_too_many"
    SKILLS_UNGROUPED = "skills_ungrouped"
    EDUCATION_EMPTY = "education_empty"
    EDUCATION_SPARSE = "education_sparse"
    CONTENT_BUZZWORDS = "content_buzzwords"
    FORMATTING_NO_BULLETS = "formatting_no_bullets"


S = SuggestionSection
P = Priority

SUGGESTION_CATALOG: dict[tuple[SuggestionSection, Condition], Suggestion] = {
    (S.PERSONAL_INFO, Condition.SUMMARY_TOO_BRIEF): Suggestion(
        section=S.PERSONAL_INFO,
        priority=P.HIGH,
        message=(
            "Your personal summary is too brief. Write a compelling 2-3 sentence "
            "professional summary that highlights your key strengths and career objectives."
        ),
        apply_template=(
            "Experienced full-stack developer with 5+ years building scalable web "
            "applications using modern technologies. Passionate about clean code, user "
            "experience, and continuous learning. Seeking opportunities to lead development "
            "teams and architect innovative solutions."
        ),
    ),
    (S.PERSONAL_INFO, Condition.SUMMARY_SHORT): Suggestion(
        section=S.PERSONAL_INFO,
        priority=P.MEDIUM,
        message=(
            "Consider expanding your personal summary to better showcase your unique "
            "value proposition."
        ),
        apply_template=(
            "Add specific achievements, certifications, or career goals to make your "
            "summary more compelling."
        ),
    ),
    (S.PERSONAL_INFO, Condition.SUMMARY_NO_ACTION_WORDS): Suggestion(
        section=S.PERSONAL_INFO,
        priority=P.MEDIUM,
        message="Use action-oriented words to make your summary more impactful.",
        apply_template=(
            "Replace passive language with strong action verbs like 'achieved', "
            "'improved', 'developed', or 'led'."
        ),
    ),
    (S.EXPERIENCE, Condition.EXPERIENCE_EMPTY): Suggestion(
        section=S.EXPERIENCE,
        priority=P.HIGH,
        message=(
            "Experience section is empty. Add your work history with specific "
            "achievements and responsibilities."
        ),
        apply_template=(
            "Software Developer | Company Name | 2020-2023\n"
            "• Developed and maintained web applications using React and .NET\n"
            "• Collaborated with cross-functional teams to deliver features\n"
            "• Improved application performance by 30% through optimization"
        ),
    ),
    (S.EXPERIENCE, Condition.EXPERIENCE_NOT_QUANTIFIED): Suggestion(
        section=S.EXPERIENCE,
        priority=P.HIGH,
        message=(
            "Add specific numbers and metrics to quantify your achievements. This makes "
            "your experience more compelling."
        ),
        apply_template=(
            "• Increased user engagement by 25% through UI/UX improvements\n"
            "• Reduced application load time by 40% (from 3s to 1.8s)\n"
            "• Managed team of 5 developers and delivered 12 features on schedule"
        ),
    ),
    (S.EXPERIENCE, Condition.EXPERIENCE_NO_ACTION_VERBS): Suggestion(
        section=S.EXPERIENCE,
        priority=P.MEDIUM,
        message=(
            "Start each bullet point with strong action verbs to demonstrate your "
            "proactive approach."
        ),
        apply_template=(
            "• Developed new features using React and TypeScript\n"
            "• Implemented CI/CD pipeline reducing deployment time by 60%\n"
            "• Led code reviews and mentored junior developers"
        ),
    ),
    (S.SKILLS, Condition.SKILLS_EMPTY): Suggestion(
        section=S.SKILLS,
        priority=P.HIGH,
        message="Skills section is empty. Add relevant technical and soft skills.",
        apply_template=(
            "Technical: JavaScript, React, .NET Core, SQL, Git\n"
            "Soft Skills: Leadership, Communication, Problem Solving, Team Collaboration"
        ),
    ),
    (S.SKILLS, Condition.SKILLS_TOO_FEW): Suggestion(
        section=S.SKILLS,
        priority=P.MEDIUM,
        message=(
            "Consider adding more relevant skills to demonstrate your breadth of knowledge."
        ),
        apply_template=(
            "Add skills like: Docker, AWS, REST APIs, Unit Testing, Agile/Scrum, "
            "Database Design"
        ),
    ),
    (S.SKILLS, Condition.SKILLS_TOO_MANY): Suggestion(
        section=S.SKILLS,
        priority=P.LOW,
        message=(
            "Too many skills can dilute your expertise. Focus on your core competencies "
            "and most relevant skills."
        ),
        apply_template=(
            "Group related skills: 'Frontend: React, Angular, Vue | Backend: .NET, "
            "Node.js | DevOps: Docker, AWS, Azure'"
        ),
    ),
    (S.SKILLS, Condition.SKILLS_UNGROUPED): Suggestion(
        section=S.SKILLS,
        priority=P.LOW,
        message="Consider grouping your skills by category for better organization.",
        apply_template=(
            "Programming Languages: C#, JavaScript, Python\n"
            "Frameworks: .NET Core, React, Angular\n"
            "Tools: Git, Docker, Azure DevOps"
        ),
    ),
    (S.EDUCATION, Condition.EDUCATION_EMPTY): Suggestion(
        section=S.EDUCATION,
        priority=P.MEDIUM,
        message=(
            "Add your educational background including degree, institution, and "
            "graduation year."
        ),
        apply_template=(
            "Bachelor of Science in Computer Science\n"
            "University Name | Graduated: 2023\n"
            "Relevant Coursework: Data Structures, Algorithms, Database Systems"
        ),
    ),
    (S.EDUCATION, Condition.EDUCATION_SPARSE): Suggestion(
        section=S.EDUCATION,
        priority=P.LOW,
        message=(
            "Consider adding more details about your education, including relevant "
            "coursework or achievements."
        ),
        apply_template=(
            "Add: GPA (if 3.5+), relevant coursework, honors, certifications, or "
            "academic projects."
        ),
    ),
    (S.CONTENT, Condition.CONTENT_BUZZWORDS): Suggestion(
        section=S.CONTENT,
        priority=P.LOW,
        message=(
            "Reduce corporate buzzwords. Use clear, specific language that directly "
            "describes your achievements."
        ),
        apply_template=(
            "Replace buzzwords with specific actions: 'led a team' instead of "
            "'facilitated team synergy'"
        ),
    ),
    (S.FORMATTING, Condition.FORMATTING_NO_BULLETS): Suggestion(
        section=S.FORMATTING,
        priority=P.MEDIUM,
        message=(
            "Use bullet points to make your experience section more scannable and "
            "professional."
        ),
        apply_template=(
            "Convert paragraphs to bullet points:\n"
            "• [Specific achievement or responsibility]\n"
            "• [Another achievement or responsibility]"
        ),
    ),
}


def lookup(section: SuggestionSection, condition: Condition) -> Suggestion:
    return SUGGESTION_CATALOG[(section, condition)]
