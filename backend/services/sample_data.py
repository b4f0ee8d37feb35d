"""Canned results returned in sample mode (no network, no API quota)."""

SAMPLE_EXTRACTED = {
    "title": "Full Stack Developer - Trauma-Informed Solutions",
    "company_name": "VESTA Social Innovation Technologies",
    "location": "Toronto",
    "country_hint": "Canada",
    "remote": "Flexible remote with occasional in-person collaboration",
    "employment_type": None,
    "salary_text": "$100,000-$115,000 + benefits (commensurate with experience)",
    "salary_min_cad": 100000,
    "salary_max_cad": 115000,
    "experience_required_text": "3+ years of experience as a full stack developer",
    "experience_years_min": 3,
    "experience_years_max": None,
    "spoken_languages": [],
    "programming_languages": ["JavaScript", "TypeScript", "HTML5", "CSS3"],
    "required_skills": [
        "Full stack development",
        "JavaScript/TypeScript",
        "HTML5",
        "CSS3",
        "React JS",
        "Node.js",
        "Express",
        "MySQL",
        "MariaDB or similar databases",
        "Version control (Git)",
        "CI/CD practices",
        "Cloud platforms (AWS, Azure, GCP)",
        "Web security",
        "Authentication and authorization",
        "Accessibility standards (WCAG 2.1)",
        "Responsive design",
        "Excellent communication",
        "Teamwork",
        "Self-direction",
    ],
    "preferred_skills": [
        "Passion for technology for social impact",
        "Commitment to inclusive, ethical product development",
    ],
    "responsibilities": [
        "Design, deploy, and maintain reliable and scalable full-stack software solutions",
        "Monitor, test, and optimize application performance and security",
        "Troubleshoot, debug, and resolve full stack issues",
    ],
    "qualifications": [],
    "min_education": None,
    "seniority_level": "Senior",
    "company_size": None,
    "posting_date": None,
    "closing_date": None,
    "application_instructions": "Send your resume and a brief cover letter to ContactUs@vestasit.com.",
    "job_field": "Software Development",
}

SAMPLE_COMPARISON = {
    "overall_eligibility": "red",
    "summary_explanation": (
        "Major disqualifiers: JD requires 3+ years and 'Senior' level while candidate has max 2 years "
        "and prefers Entry/Junior. Location, remote and job field are favorable; several JD fields are unknown."
    ),
    "fields": {
        "location": {
            "color": "green",
            "explanation": "location 'Toronto' with country_hint 'Canada' matches candidate country 'Canada'.",
            "evidence": "Toronto",
        },
        "remote": {
            "color": "green",
            "explanation": (
                "remote 'Flexible remote with occasional in-person collaboration' matches candidate "
                "preferred_work_mode ['remote','hybrid']."
            ),
            "evidence": "Flexible remote with occasional in-person collaboration",
        },
        "salary_min_cad": {
            "color": "red",
            "explanation": "salary_min_cad (100000) > candidate max_salary_cad (90000).",
            "evidence": 100000,
        },
        "experience_years_min": {
            "color": "red",
            "explanation": "experience_years_min (3) > candidate max_experience_years (2).",
            "evidence": 3,
        },
        "seniority_level": {
            "color": "red",
            "explanation": "seniority_level 'Senior' conflicts with candidate preferred_seniority_levels ['Entry','Junior'].",
            "evidence": "Senior",
        },
        "programming_languages": {
            "color": "yellow",
            "explanation": (
                "programming_languages ['JavaScript','TypeScript','HTML5','CSS3'] only partially overlap "
                "with candidate comfortable_with (react)."
            ),
            "evidence": ["JavaScript", "TypeScript", "HTML5", "CSS3"],
        },
        "job_field": {
            "color": "green",
            "explanation": "job_field 'Software Development' matches candidate job_field ['software development','web development'].",
            "evidence": "Software Development",
        },
        "employment_type": {
            "color": "grey",
            "explanation": "employment_type is null in JD; candidate allows ['full-time','internship'].",
            "evidence": None,
        },
        "company_size": {
            "color": "grey",
            "explanation": "company_size is null in JD; unable to compare with min_employees_in_company 50.",
            "evidence": None,
        },
    },
}
