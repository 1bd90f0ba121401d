"""Static engineering context written into every .rules file.

Each section maps a key to a single line of guidance. The mapping is
read-only; templates.py decides labels and ordering.
"""

from types import MappingProxyType

PRINCIPLES = "EVIDENCE > ASSUMPTIONS • CODE > DOCUMENTATION • SHIP > POLISH • USER VALUE > FEATURES"

_SECTIONS = {
    "loop": {
        "measure": "Use codebase_search/grep first. Gather evidence before decisions.",
        "plan": "Create deterministic plan with success criteria. Use checklists.",
        "execute": "Make minimal, reversible changes (<50 lines/diff maximum).",
        "validate": "Run quality gates. Auto-fix via tools when possible.",
    },
    "quality_standards": {
        "types": "Explicit types required. No implicit any.",
        "components": "Error boundaries. Loading states. Proper props.",
        "apis": "Input validation. Error responses. Retry logic.",
        "functions": "Single responsibility. Explicit naming. Early returns.",
        "tests": "Critical paths tested. Edge cases covered.",
    },
    "development_flow": {
        "feature": "Write test → Implement → Verify → Deploy.",
        "debugging": "Reproduce → Fix → Test → Prevent regression.",
        "refactor": "Tests pass → Refactor → Tests still pass.",
    },
    "ide_capabilities": {
        "search": "Use codebase search before making changes.",
        "context": "Reference existing patterns in the project.",
        "files": "Multi-file edits when changes span components.",
    },
    "architectural_principles": {
        "separation": "Separate concerns. UI logic separate from business logic.",
        "state_management": "Use appropriate state scope. Local vs global state.",
        "data_flow": "Unidirectional data flow. Clear data dependencies.",
        "error_handling": "Graceful degradation. User-friendly error messages.",
        "performance": "Lazy loading. Bundle optimization. Core Web Vitals.",
    },
    "specialists": {
        "frontend": "UI/component → User needs > accessibility > performance.",
        "backend": "API/service → Reliability > security > performance.",
        "testing": "Quality assurance → Coverage > automation > documentation.",
        "security": "Auth/data → Security > compliance > convenience.",
        "performance": "Optimization → Measure > optimize > monitor.",
        "startup": "startup/MVP → NextJS + shadcn + Vercel for rapid iteration.",
    },
    "workflow_principles": {
        "branching": "Feature branches. Clean commit history.",
        "testing": "Test before merge. Automated quality gates.",
        "deployment": "Automated deployment. Rollback capability.",
        "monitoring": "Error tracking. Performance metrics.",
    },
    "unknowns": {
        "package_manager": "UNKNOWN -> (npm|pnpm|yarn|bun)",
        "styling": "UNKNOWN -> (tailwind|css-modules|styled-components)",
        "database": "UNKNOWN -> (postgres|mysql|sqlite|mongodb)",
        "orm": "UNKNOWN -> (prisma|drizzle|typeorm)",
        "auth": "UNKNOWN -> (nextauth|clerk|supabase|auth0)",
        "deployment": "UNKNOWN -> (vercel|netlify|self-hosted)",
        "state_management": "UNKNOWN -> (zustand|redux|context)",
        "api_pattern": "UNKNOWN -> (rest|graphql|trpc|server-actions)",
        "component_library": "UNKNOWN -> (shadcn|mui|ant-design)",
        "testing": "UNKNOWN -> (jest|vitest|playwright)",
    },
    "startup_stack": {
        "description": "Opinionated NextJS webapp stack for startups",
        "core": "Next.js 14+ with App Router",
        "ui": "shadcn/ui + Tailwind CSS",
        "deployment": "Vercel (serverless)",
        "focus": "Application layer utility over infrastructure",
        "philosophy": "Ship fast, iterate based on user feedback",
    },
    "decision_framework": {
        "complexity": "Start simple. Add complexity only when needed.",
        "optimization": "Measure before optimizing. Profile before assuming.",
        "features": "User value first. Ship incrementally.",
        "debugging": "Reproduce first. Fix root cause. Prevent regression.",
    },
}

SUCCESS_CRITERIA = (
    "Evidence-based development process",
    "Quality standards maintained",
    "Critical paths tested",
    "User value delivered",
)

AI_CONTEXT = MappingProxyType(
    {name: MappingProxyType(section) for name, section in _SECTIONS.items()}
)


def section(name: str) -> MappingProxyType:
    """Return one named section of the context, e.g. ``section("loop")``."""
    return AI_CONTEXT[name]
