"""Prompt templates sent to the generation API, plus the MCP workflow prompt."""

from __future__ import annotations

from typing import Optional, Sequence

from mcp.server.fastmcp import FastMCP

from prompts.styles import (
    ARTICLE_STYLES,
    DEFAULT_ARTICLE_STYLE,
    DEFAULT_REPO_STYLE,
    REPO_STYLES,
    normalize_language,
    resolve_style,
)

REPO_PROMPT_FILE_LIMIT = 150
QUESTION_FILE_LIMIT = 300

NO_ANSWER = "I couldn't generate an answer at this time."

_TABLETOP_STYLE = (
    "VISUAL STYLE: Photorealistic Miniature Diorama. The data flow should look like a complex, "
    "glowing 3D printed physical model sitting on a dark, reflective executive desk."
)
_TABLETOP_PERSPECTIVE = (
    "PERSPECTIVE & RENDER: Isometric view with TILT-SHIFT depth of field (blurry "
    "foreground/background) to make it look like a small, tangible object on a table. Cinematic "
    "volumetric lighting. Highly detailed, 'octane render' style."
)
_FLAT_PERSPECTIVE = "Perspective: Clean 2D flat diagrammatic view straight-on. No 3D effects."


def _limit(files: Sequence[str], limit: int) -> list[str]:
    return list(files[:limit])


def build_repo_infographic_prompt(
    repo_name: str,
    files: Sequence[str],
    style: Optional[str] = None,
    *,
    is_3d: bool = False,
    language: Optional[str] = None,
) -> str:
    lang = normalize_language(language)
    context = ", ".join(_limit(files, REPO_PROMPT_FILE_LIMIT))

    if is_3d:
        # The diorama look replaces whatever flat style was requested
        style_guidelines = _TABLETOP_STYLE
        perspective = _TABLETOP_PERSPECTIVE
    else:
        _, guideline = resolve_style(style, REPO_STYLES, DEFAULT_REPO_STYLE)
        style_guidelines = f"VISUAL STYLE: {guideline.rstrip('.')}."
        perspective = _FLAT_PERSPECTIVE

    return f"""Create a highly detailed technical logical data flow diagram infographic for GitHub repository : "{repo_name}".

STRICT VISUAL STYLE GUIDELINES:
{style_guidelines}
- LAYOUT: Distinct Left-to-Right flow.
- CENTRAL CONTAINER: Group core logic inside a clearly defined central area.
- ICONS: Use relevant technical icons (databases, servers, code files, users).
- TYPOGRAPHY: Highly readable technical font. Text MUST be in {lang}.

{perspective}

Repository Context: {context}...

Diagram Content Requirements:
1. Title exactly: "{repo_name} Data Flow" (Translated to {lang} if not English)
2. Visually map the likely data flow based on the provided file structure.
3. Ensure the "Input -> Processing -> Output" structure is clear.
4. Add short, clear text labels to connecting arrows indicating data type (e.g., "JSON", "Auth Token").
5. IMPORTANT: All text labels and explanations in the image must be written in {lang}.
"""


def build_repo_question_prompt(question: str, files: Sequence[str]) -> str:
    tree = "\n".join(_limit(files, QUESTION_FILE_LIMIT))
    return f"""You are a senior software architect reviewing a project.

Attached is an architectural infographic of the project.
Here is the actual file structure of the repository:
{tree}

User Question: "{question}"

Using BOTH the visual infographic and the file structure as context, answer the user's question.
If they ask about optimization, suggest specific areas based on the likely bottlenecks visible in standard architectures like this.
Keep answers concise, technical, and helpful.
"""


def build_node_question_prompt(node_label: str, question: str, files: Sequence[str]) -> str:
    tree = "\n".join(_limit(files, QUESTION_FILE_LIMIT))
    return f"""You are a senior software architect analyzing a repository.

The user is asking about a specific node in the dependency graph labeled: "{node_label}".

Repository File Structure Context (first {QUESTION_FILE_LIMIT} files):
{tree}

User Question: "{question}"

Based on the node name "{node_label}" and the file structure, explain what this component likely does, its responsibilities, and answer the specific question.
Keep the response technical, concise, and helpful for a developer.
"""


def build_article_analysis_prompt(url: str, language: Optional[str] = None) -> str:
    lang = normalize_language(language)
    return f"""You are an expert Information Designer. Your goal is to extract the essential structure from a web page to create a clear, educational infographic.

Analyze the content at this URL: {url}

TARGET LANGUAGE: {lang}.

Provide a structured breakdown specifically designed for visual representation in {lang}:
1. INFOGRAPHIC HEADLINE: The core topic in 5 words or less (in {lang}).
2. KEY TAKEAWAYS: The 3 to 5 most important distinct points, steps, or facts (in {lang}). THESE WILL BE THE MAIN SECTIONS OF THE IMAGE.
3. SUPPORTING DATA: Any specific numbers, percentages, or very short quotes that add credibility.
4. VISUAL METAPHOR IDEA: Suggest ONE simple visual concept that best fits this content (e.g., "a roadmap with milestones", "a funnel", "three contrasting pillars", "a circular flowchart").

Keep the output concise and focused purely on what should be ON the infographic. Ensure all content is in {lang}.
"""


def article_fallback_summary(url: str, language: Optional[str] = None) -> str:
    return f"Create an infographic about: {url}. Translate text to {normalize_language(language)}."


def build_article_image_prompt(summary: str, style: Optional[str] = None, language: Optional[str] = None) -> str:
    lang = normalize_language(language)
    name, guideline = resolve_style(style, ARTICLE_STYLES, DEFAULT_ARTICLE_STYLE)
    if name in ARTICLE_STYLES:
        style_line = f"STYLE: {guideline}"
    else:
        style_line = f'STYLE: Custom User Style: "{guideline}".'

    return f"""Create a professional, high-quality educational infographic based strictly on this structured content plan:

{summary}

VISUAL DESIGN RULES:
- {style_line}
- LANGUAGE: The text within the infographic MUST be written in {lang}.
- LAYOUT: MUST follow the "VISUAL METAPHOR IDEA" from the plan above if one was provided.
- TYPOGRAPHY: Clean, highly readable sans-serif fonts. The "INFOGRAPHIC HEADLINE" must be prominent at the top.
- CONTENT: Use the actual text from "KEY TAKEAWAYS" in the image. Do not use placeholder text like Lorem Ipsum.
- GOAL: The image must be informative and readable as a standalone graphic.
"""


def register_prompts(mcp: FastMCP) -> None:
    @mcp.prompt(
        name="generate_infographic_workflow",
        description=(
            "Guided workflow: turn a GitHub repository or an article URL into an "
            "infographic, then answer follow-up questions about it."
        ),
    )
    def generate_infographic_workflow_prompt() -> str:
        return r"""
==================================================
ROLE
==================================================
You drive an MCP server that can:
- list the relevant source files of a GitHub repository
- generate an infographic for a repository or a web article
- answer questions about a generated repository infographic
- re-style an existing image

==================================================
HARD RULES
==================================================
1) Never invent repository contents. Use list_repo_files when you need them.
2) Pick styles and languages ONLY from the resources:
   infographic://styles/repo, infographic://styles/article, infographic://languages
   (or pass the user's own style text verbatim).
3) Report tool errors verbatim. A rate-limit error means "wait and try again
   later"; do NOT call the tool again in the same turn.

==================================================
WORKFLOW
==================================================
1) Call generate_infographic with:
   {
     "target": "<owner/repo | GitHub URL | article URL>",
     "style": "<preset or free text, optional>",
     "language": "<language, optional>",
     "is_3d": false
   }
2) Keep the returned history id.
3) For questions about the diagram call ask_infographic_question with the id.
   For a single component call ask_node_question with the component label.
4) To re-style the image call edit_image with the id and an instruction.
5) Previous results are listed in infographic://history.
"""
