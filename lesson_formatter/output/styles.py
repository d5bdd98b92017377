"""Stylesheets for rendered lessons.

The class names here are the ones emitted by the assembler, the structured
renderer, the math formatter and the enrichment passes.
"""

MATH_STYLES = """
.math { font-family: 'Latin Modern Math', 'Cambria Math', Georgia, serif; background: #fef3c7;
  padding: 0.125rem 0.375rem; border-radius: 0.25rem; font-weight: 500; white-space: nowrap; }
.fraction { font-family: Georgia, serif; font-weight: 600; color: #4338ca; }
.math.multiplication { background: #dbeafe; color: #1e40af; }
.math.division { background: #fce7f3; color: #9d174d; }
.math.addition { background: #dcfce7; color: #166534; }
.math.subtraction { background: #fee2e2; color: #991b1b; }
.math.fraction-operation, .math.fraction-equality { background: #fef9c3; color: #854d0e; }
.math.fill-blank { background: #f3e8ff; color: #6b21a8; border: 1px dashed #a855f7; }
.math.comparison { background: #e0e7ff; color: #3730a3; }
.math.algebraic, .math.parenthesized, .math.equation { background: #f0fdfa; color: #0f766e; font-style: italic; }
.age-young .math { font-size: 1.2em; padding: 0.25rem 0.5rem; border-radius: 0.5rem; }
.age-young .fraction { font-size: 1.25em; font-weight: 700; }
.interactive-exercise .math { background: rgba(251, 191, 36, 0.2); border: 1px solid rgba(251, 191, 36, 0.5); }
"""

STRUCTURED_STYLES = """
.structured-content { font-family: -apple-system, 'Segoe UI', Roboto, sans-serif; line-height: 1.7; color: #1a202c; }
.structured-content.age-young { font-size: 1.1rem; line-height: 1.8; }
.structured-content.color-vibrant .content-header { color: #7c3aed; }

.metadata-bar { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); color: white;
  padding: 1rem 1.25rem; border-radius: 12px; margin-bottom: 1.5rem; }
.metadata-items { display: flex; flex-wrap: wrap; gap: 1rem; }
.metadata-item { background: rgba(255, 255, 255, 0.2); padding: 0.25rem 0.75rem; border-radius: 20px; font-size: 0.875rem; }
.metadata-bar .label { font-weight: 600; }

.content-header { margin: 1.5rem 0 0.75rem; font-weight: 700; color: #2d3748; }
.header-level-1 { font-size: 1.875rem; border-bottom: 3px solid #4299e1; padding-bottom: 0.5rem; }
.header-level-2 { font-size: 1.5rem; color: #2b6cb0; }
.header-level-3 { font-size: 1.25rem; color: #3182ce; }
.header-level-4 { font-size: 1.125rem; color: #4299e1; }

.content-paragraph { margin-bottom: 1rem; color: #4a5568; }
.explanation-block { margin: 1rem 0; padding: 1rem; background: #f7fafc; border-radius: 8px; border-left: 4px solid #4299e1; }
.explanation-important { background: #fffbeb; border-left-color: #f59e0b; }

.key-concept-box { background: linear-gradient(135deg, #fef3c7 0%, #fde68a 100%); border: 2px solid #f59e0b;
  border-radius: 12px; padding: 1rem 1.25rem; margin: 1.25rem 0; }
.concept-title { font-weight: 700; color: #92400e; }
.rule-box { background: linear-gradient(135deg, #e0f2fe 0%, #bae6fd 100%); border: 2px solid #0284c7;
  border-radius: 12px; padding: 1rem 1.25rem; margin: 1.25rem 0; }
.rule-title { font-weight: 700; color: #0c4a6e; }
.rule-steps { margin: 0.75rem 0; padding-left: 1.5rem; }
.rule-formula { background: white; padding: 0.75rem 1rem; border-radius: 8px; text-align: center; }
.formula-block { background: #fefce8; border: 2px dashed #ca8a04; border-radius: 12px; padding: 1rem;
  margin: 1rem 0; text-align: center; }
.formula-display { font-size: 1.25rem; font-weight: 600; color: #713f12; }

.word-problem-block { border: 2px solid #e5e7eb; border-radius: 12px; margin: 1.25rem 0; overflow: hidden; }
.problem-header { background: linear-gradient(135deg, #8b5cf6 0%, #7c3aed 100%); color: white; padding: 0.75rem 1rem; }
.problem-title { font-weight: 700; }
.problem-parts { padding: 1rem; }
.problem-parts > div { padding: 0.75rem; margin-bottom: 0.5rem; border-radius: 8px; }
.problem-statement { background: #faf5ff; border-left: 4px solid #8b5cf6; }
.problem-understand { background: #f0fdf4; border-left: 4px solid #22c55e; }
.problem-setup { background: #eff6ff; border-left: 4px solid #3b82f6; }
.problem-calculate { background: #fefce8; border-left: 4px solid #eab308; }
.problem-simplify { background: #fff7ed; border-left: 4px solid #f97316; }
.problem-answer { background: #dcfce7; border-left: 4px solid #16a34a; }
.part-label { font-weight: 700; display: block; font-size: 0.875rem; text-transform: uppercase; }

.content-list { margin: 0.75rem 0; padding-left: 1.5rem; }
.list-title { font-weight: 600; margin-bottom: 0.5rem; color: #374151; }
.step-by-step-block { background: #f0fdf4; border: 2px solid #22c55e; border-radius: 12px; padding: 1rem; margin: 1.25rem 0; }
.steps-title { font-weight: 700; color: #15803d; }
.step-item { display: flex; gap: 1rem; margin-bottom: 0.75rem; }
.step-number { width: 28px; height: 28px; background: #22c55e; color: white; border-radius: 50%;
  display: flex; align-items: center; justify-content: center; font-weight: 700; flex-shrink: 0; }
.step-label { font-weight: 600; color: #166534; }

.question-block { background: #eef2ff; border: 2px solid #6366f1; border-radius: 12px; padding: 1rem; margin: 1rem 0; }
.question-text { font-weight: 600; color: #4338ca; margin: 0; }
.question-hint { margin-top: 0.5rem; font-size: 0.875rem; color: #6366f1; font-style: italic; }
.answer-block { background: #dcfce7; border: 2px solid #22c55e; border-radius: 12px; padding: 1rem; margin: 1rem 0; }
.answer-text { font-weight: 600; color: #15803d; margin: 0; }

.vocabulary-block { background: #fdf4ff; border: 2px solid #d946ef; border-radius: 12px; padding: 1rem; margin: 1.25rem 0; }
.vocab-item { margin-bottom: 0.5rem; }
.vocab-term { font-weight: 700; color: #a21caf; margin-right: 0.5rem; }
.vocab-example { display: block; font-style: italic; color: #86198f; }

.table-title { font-weight: 600; margin-bottom: 0.5rem; }
.content-table { width: 100%; border-collapse: collapse; margin: 1rem 0; }
.content-table th, .content-table td { border: 1px solid #e5e7eb; padding: 0.5rem 0.75rem; text-align: left; }
.content-table th { background: #f3f4f6; font-weight: 600; }

.divider-block { margin: 2rem 0; border-top: 2px solid #e5e7eb; }
.divider-dashed { border-top-style: dashed; }
.divider-section { border-top: 4px double #cbd5e0; }
.divider-block.with-label { text-align: center; }
.divider-label { position: relative; top: -0.8rem; background: white; padding: 0 1rem; color: #718096; }
"""

HEURISTIC_STYLES = """
.formatted-content { font-family: -apple-system, 'Segoe UI', Roboto, sans-serif; line-height: 1.7; color: #1a202c; }
.formatted-content.age-young { font-size: 1.1rem; line-height: 1.8; }
.lesson-header { margin: 1.5rem 0 0.75rem; font-weight: 700; color: #2b6cb0; }
.question { color: #4338ca; }
.metadata { color: #718096; font-size: 0.9rem; }
.section-break { margin: 2rem 0; border-top: 2px solid #e5e7eb; text-align: center; }
.section-marker { position: relative; top: -0.8rem; background: white; padding: 0 1rem; color: #a0aec0; font-size: 0.8rem; }
.slide-header { border-bottom: 2px solid #4299e1; margin: 1.5rem 0 1rem; }
.slide-number { color: #718096; font-size: 0.8rem; text-transform: uppercase; }

.tip-block, .note-block, .warning-block { border-radius: 8px; padding: 0.75rem 1rem; margin: 1rem 0; }
.tip-block { background: #ecfdf5; border-left: 4px solid #10b981; }
.note-block { background: #eff6ff; border-left: 4px solid #3b82f6; }
.warning-block { background: #fef3c7; border-left: 4px solid #f59e0b; }
.tip-label { color: #059669; font-weight: 700; }
.note-label { color: #2563eb; font-weight: 700; }
.warning-label { color: #d97706; font-weight: 700; }
.definition-block { background: #f5f3ff; border-left: 4px solid #8b5cf6; padding: 0.75rem 1rem; margin: 0.75rem 0; }
.definition-block .term { font-weight: 700; color: #6d28d9; margin-right: 0.5rem; }
.definition-block .term::after { content: ':'; }
.example-block { background: #f8fafc; border: 1px solid #e2e8f0; border-radius: 8px; padding: 0.75rem 1rem; margin: 1rem 0; }
.example-title { font-weight: 700; color: #475569; }

.vocabulary-term { border-bottom: 2px dotted #8b5cf6; cursor: help; }
.interactive-exercise { background: rgba(251, 191, 36, 0.15); border-radius: 4px; }
"""


def stylesheet() -> str:
    """Return the combined stylesheet for a standalone lesson page."""
    return '\n'.join(section.strip() for section in (HEURISTIC_STYLES, STRUCTURED_STYLES, MATH_STYLES))
