from researchai.pipeline.analysis import (
    placeholder_analysis,
    parse_analysis,
    run_paper_analysis,
)
from researchai.pipeline.generation import (
    CONTENT_CATALOG,
    InvalidContentType,
    resolve_content_type,
    run_content_generation,
)
