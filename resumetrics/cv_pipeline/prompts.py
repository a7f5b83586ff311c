"""Prompt text sent to the analysis provider. Wording is configuration; field names are the contract."""

RESUME_ANALYSIS_PROMPT = """Analyze this resume and provide a JSON response with:
1. Basic information
2. Strengths and improvements
3. CV assessment
4. Career analysis
5. Growth roadmap

Return only valid JSON matching this structure:
{
  "name": "string",
  "email": "string",
  "skills": ["string"],
  "experience": "string",
  "currentPosition": {
    "title": "string",
    "designation": "string",
    "company": "string",
    "duration": "string"
  },
  "careerAnalysis": {
    "currentLevel": "string",
    "totalYearsOfExperience": number,
    "positionHistory": [{
      "title": "string",
      "designation": "string",
      "company": "string",
      "duration": "string",
      "level": "string",
      "responsibilities": ["string"]
    }],
    "suggestedNextRole": "string",
    "careerProgression": "string",
    "progressionRoadmap": {
      "targetRole": "string",
      "estimatedTimeframe": "string",
      "requiredSkills": [{
        "skill": "string",
        "priority": "high|medium|low",
        "currentLevel": "none|basic|intermediate|advanced",
        "actionItems": ["string"]
      }],
      "certifications": ["string"],
      "milestones": [{
        "title": "string",
        "timeframe": "string",
        "actions": ["string"]
      }]
    }
  },
  "analysis": {
    "strengths": {
      "skills": ["string"],
      "experience": ["string"],
      "marketAlignment": ["string"]
    },
    "improvements": {
      "skills": ["string"],
      "experience": ["string"],
      "suggestions": ["string"]
    },
    "marketScore": number between 0 and 100,
    "cvScore": number between 0 and 100
  }
}"""

JOB_MATCH_PROMPT = """Compare the CV below with the job description and assess how well the candidate fits.
Return only valid JSON matching this structure:
{
  "matchRate": number between 0 and 100,
  "suitable": true or false,
  "cvSummary": {
    "position": "string",
    "experience": ["string"],
    "skills": ["string"]
  },
  "jobSummary": {
    "title": "string",
    "responsibilities": ["string"],
    "requirements": ["string"]
  },
  "improvements": [{
    "category": "string",
    "details": "string",
    "priority": "high|medium|low"
  }],
  "analysis": {
    "strengths": ["string"],
    "gaps": ["string"],
    "recommendations": ["string"]
  }
}
Order improvements from most to least important."""


def build_resume_prompt(resume_text: str) -> str:
    return f"{RESUME_ANALYSIS_PROMPT}\n\nResume: {resume_text}"


def build_match_prompt(resume_text: str, job_description: str) -> str:
    return f"{JOB_MATCH_PROMPT}\n\nCV: {resume_text}\n\nJob description: {job_description}"
