"""Fixed pattern tables shared by the analysis, classification and rendering stages.

Everything here is module-level, read-only configuration. Components import
the tables they need; nothing mutates them at runtime.
"""

import re

# Abbreviations whose trailing period never ends a sentence
ABBREVIATIONS = (
    'Mr', 'Mrs', 'Ms', 'Dr', 'Prof', 'Sr', 'Jr',
    'vs', 'etc', 'i.e', 'e.g', 'al', 'Inc', 'Ltd', 'Co',
    'Jan', 'Feb', 'Mar', 'Apr', 'Jun', 'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec',
    'St', 'Ave', 'Blvd', 'Rd', 'Mt', 'ft', 'in', 'cm', 'mm', 'km', 'kg', 'lb',
    'No', 'Vol', 'Ch', 'Sec', 'Fig', 'pg', 'pp',
)

# Discourse phrases that usually open a new paragraph
TRANSITION_PHRASES = (
    'For example', 'Remember', 'Note that', 'In other words',
    'Therefore', 'However', 'First,', 'Second,', 'Third,', 'Finally,',
    'Next,', 'Then,', 'Also,', 'Additionally', 'The key', 'The simple',
    'Think about', "Let's", 'Now,', "Here's", 'To summarize',
)

# Section keywords used by boundary detection (regex fragments)
BOUNDARY_SECTIONS = (
    'Learning Objectives?', 'Prerequisites?', 'Key Concepts?', 'Summary',
    'Introduction', 'Overview', 'Conclusion', 'Examples?', 'Practice',
    'Exercises?', 'Vocabulary', 'Formula', 'Rules?', 'Definitions?',
    'Materials?', 'Procedure', 'Steps?', 'Review', 'Assessment',
)

# Section keywords pushed onto their own paragraph by the restorer
RESTORER_SECTIONS = (
    'Learning Objectives?', 'Prerequisites?', 'Key Concepts?', 'Summary',
    'Introduction', 'Overview', 'Conclusion', 'Review', 'Vocabulary',
    'Materials?', 'Procedure', 'Assessment', 'Practice', 'Exercises?',
)

QUESTION_STARTERS = re.compile(
    r'([.!?])\s*(What\s+(?:is|are|does|do)|How\s+(?:do|does|can|to)|'
    r'Why\s+(?:do|does|is|are)|When\s+(?:do|does|should))',
    re.IGNORECASE,
)

BULLET_GLYPHS = '•·∙‣⁃○●◦▪▸'

# Canonical section header phrasings (level 2)
SECTION_HEADERS = tuple(re.compile(p, re.IGNORECASE) for p in (
    r'^(Learning Objectives?|Objectives?|Goals?):?\s*$',
    r'^(Prerequisites?|Requirements?|Before You Begin):?\s*$',
    r'^(Key Concepts?|Important Concepts?|Main Ideas?):?\s*$',
    r'^(Summary|Conclusion|Review|Recap):?\s*$',
    r'^(Introduction|Overview|Background):?\s*$',
    r'^(Examples?|Practice|Exercises?|Problems?|Activities?):?\s*$',
    r'^(Steps?|Procedure|Instructions?|How To):?\s*$',
    r'^(Definition|Formula|Rule|Theorem|Law):?\s*$',
    r'^(Note|Tip|Remember|Important|Warning|Caution):?\s*$',
    r'^(Materials?|Supplies|What You Need):?\s*$',
))

NUMBERED_HEADER = re.compile(
    r'^((?:Step|Example|Part|Section|Chapter|Lesson|Unit|Question|Problem|Exercise)\s*\d+)\s*[:.)]\s*',
    re.IGNORECASE,
)
ALL_CAPS_HEADER = re.compile(r'^([A-Z][A-Z\s]{5,})$')
TITLE_CASE_HEADER = re.compile(r'^([A-Z][a-z]+(?:\s+[A-Z][a-z]+){1,5})\s*$')

# "-" and "*" only count as bullets when followed by whitespace
BULLET_POINT = re.compile(r'^\s*(?:[' + BULLET_GLYPHS + r']|[-*](?=\s))\s*')
NUMBERED_ITEM = re.compile(r'^\s*(\d+)[.)]\s+')
LETTERED_ITEM = re.compile(r'^\s*([a-zA-Z])[.)]\s+')

QUESTION_LINE = re.compile(
    r'^(What|Why|How|When|Where|Which|Who|Can|Do|Does|Is|Are|Will|Would|Should|Could)\s+.+\?$',
    re.IGNORECASE,
)

DURATION_LINE = re.compile(r'(?:Duration|Time|Length):\s*[\d-]+\s*(?:minutes?|mins?|hours?|hrs?)', re.IGNORECASE)
GRADE_LEVEL_LINE = re.compile(r'(?:Grade|Level|Year)(?:\s*Level)?:\s*(?:K|\d+)(?:st|nd|rd|th)?(?:\s*Grade)?', re.IGNORECASE)
SUBJECT_LINE = re.compile(r'(?:Subject|Topic|Course):\s*[A-Za-z\s]+', re.IGNORECASE)

SECTION_MARKER = re.compile(r'\[(?:Section|Page)\s*(\d+)\]', re.IGNORECASE)
SECTION_DIVIDER = re.compile(r'^---SECTION\s*(\d+)---$')

# Semantic block phrasings
SLIDE_MARKER = re.compile(r'^---\s*SLIDE\s*(\d+)\s*:\s*(.+?)\s*---$', re.IGNORECASE)
TIP = re.compile(r'^(?:💡\s*)?(?:Tip|Hint|Pro Tip|Quick Tip)\s*[:!]\s*(.+)$', re.IGNORECASE)
NOTE = re.compile(r'^(?:📝\s*)?(?:Note|Remember|Keep in mind|FYI)\s*[:!]\s*(.+)$', re.IGNORECASE)
WARNING = re.compile(
    r'^(?:⚠️\s*|⚠\s*)?(?:Warning|Caution|Watch out|Be careful|Common mistake|Avoid)\s*[:!]\s*(.+)$',
    re.IGNORECASE,
)
KEY_CONCEPT = re.compile(
    r'^(?:💡\s*)?(?:Key Concept|Important|Key Point|Key Idea|Main Idea|Essential|Fundamental)\s*[:!]\s*(.+)$',
    re.IGNORECASE,
)
RULE = re.compile(r'^(?:📐\s*)?(?:Rule|The Rule|Grammar Rule|Math Rule|Spelling Rule)\s*[:!]\s*(.+)$', re.IGNORECASE)
FORMULA = re.compile(r'^(?:🔢\s*)?(?:Formula|Equation)\s*[:!]\s*(.+)$', re.IGNORECASE)
EXAMPLE = re.compile(
    r'^(?:📝\s*)?(?:Example|For example|For instance|e\.g\.|Such as|Like)\s*[:!]\s*(.+)$',
    re.IGNORECASE,
)
DEFINITION = re.compile(
    r'^(?:📖\s*)?([A-Z][a-zA-Z\s]+?)'
    r'(?:\s*[-:–]\s*|\s+(?:means?|is defined as|refers to|is when|is a|are)\s+)(.+)$'
)
