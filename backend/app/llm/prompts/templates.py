# app/llm/prompts/templates.py

ANALYZE_PDF_V1 = """
Analyze this PDF document for accessibility issues and extract the text content.
Please provide:
1. The raw text content of the document
2. A detailed list of accessibility issues found
3. Specific fixes that should be applied
4. An accessibility score before fixes (0-100)
5. An accessible HTML version of the content with proper semantic structure

Focus on:
- Missing alt text for images
- Poor heading structure
- Low contrast text
- Missing form labels
- Reading order issues
- Table accessibility
- Link descriptions

Return STRICT JSON only (no markdown) with shape:
{
  "originalText": "extracted text content",
  "accessibleHtml": "properly structured HTML with semantic tags",
  "issues": [{"type": "issue type", "severity": "high|medium|low", "description": "detailed description", "location": "optional location"}],
  "fixes": [{"type": "fix type", "description": "what was fixed"}],
  "beforeScore": 0-100,
  "afterScore": 0-100
}
""".strip()


ANALYZE_TEXT_V1 = """
Analyze this document content for accessibility issues and create an accessible version:

{{document_text}}

Please provide a comprehensive accessibility analysis.
Return STRICT JSON only (no markdown) with shape:
{
  "originalText": "the original document text",
  "accessibleHtml": "properly structured HTML with semantic tags, headings hierarchy, and accessibility features",
  "issues": [{"type": "issue type", "severity": "high|medium|low", "description": "detailed description", "location": "optional location"}],
  "fixes": [{"type": "fix type", "description": "what was fixed"}],
  "beforeScore": 0-100,
  "afterScore": 0-100
}

Focus on creating accessible HTML that includes:
- Proper heading hierarchy (h1, h2, h3, etc.)
- Semantic HTML elements (main, section, article, aside, etc.)
- Alt text for any images or graphics mentioned
- Proper table structure with headers if tables are present
- Accessible form labels if forms are present
- Good color contrast and readable formatting
- Screen reader friendly structure
""".strip()
