"""
Career clusters whose members tend to land next to each other in the
rankings, and the follow-up questions used to separate them.

Option deltas are keyed by career title and may name careers outside the
cluster (or outside the catalog); titles that match nothing are ignored.
"""
from models.overlap_cluster import OverlapCluster, OverlapOption, OverlapQuestion


def _question(q_id: str, text: str, options: list[tuple[str, dict[str, int]]]) -> OverlapQuestion:
    return OverlapQuestion(
        id=q_id,
        text=text,
        options=tuple(OverlapOption(text=option_text, deltas=deltas) for option_text, deltas in options),
    )


BUSINESS_MANAGEMENT = OverlapCluster(
    category="business-management",
    member_titles=("Business Manager", "Marketing Manager", "Sales Manager", "Entrepreneur"),
    questions=(
        _question("biz-management-1", "What part of a business project do you find most rewarding?", [
            ("Setting the strategy and making key decisions", {"Business Manager": 30, "Entrepreneur": 20}),
            ("Crafting messaging and understanding customer needs",
             {"Marketing Manager": 30, "Business Development": 15}),
            ("Building relationships and negotiating outcomes", {"Sales Manager": 30, "Business Development": 15}),
            ("Creating something new and taking risks", {"Entrepreneur": 30, "Marketing Manager": 10}),
            ("Managing teams and helping others succeed", {"Business Manager": 25, "Sales Manager": 10}),
        ]),
        _question("biz-management-2", "What's your approach to business challenges?", [
            ("Developing a structured plan with measurable outcomes",
             {"Business Manager": 25, "Marketing Manager": 10}),
            ("Finding creative solutions that appeal to target audiences",
             {"Marketing Manager": 25, "Creative Director": 10}),
            ("Persuading others to see your perspective", {"Sales Manager": 25, "Business Development": 15}),
            ("Taking calculated risks to find innovative approaches", {"Entrepreneur": 25, "Product Manager": 10}),
            ("Analyzing data to make evidence-based decisions",
             {"Business Manager": 20, "Marketing Manager": 15, "Business Analyst": 15}),
        ]),
    ),
)

TECHNOLOGY = OverlapCluster(
    category="technology",
    member_titles=("Software Developer", "Data Scientist", "IT Manager", "UX/UI Designer"),
    questions=(
        _question("tech-1", "Which aspect of technology work most energizes you?", [
            ("Writing code and building functional systems", {"Software Developer": 30, "Software Engineer": 25}),
            ("Analyzing data patterns and creating predictive models", {"Data Scientist": 30, "Data Analyst": 20}),
            ("Designing user-friendly interfaces and experiences", {"UX/UI Designer": 30, "Web Designer": 20}),
            ("Overseeing technical projects and teams", {"IT Manager": 30, "Project Manager": 15}),
            ("Solving complex technical problems", {"Software Developer": 20, "Systems Analyst": 25}),
        ]),
        _question("tech-2", "How do you prefer to contribute to a technology project?", [
            ("Creating the architecture and building the core functionality",
             {"Software Developer": 25, "Software Engineer": 25}),
            ("Working with data to draw conclusions and inform decisions",
             {"Data Scientist": 30, "Business Analyst": 15}),
            ("Making technology accessible and enjoyable for users",
             {"UX/UI Designer": 30, "Digital Content Creator": 15}),
            ("Ensuring all systems are secure, efficient, and well-maintained",
             {"IT Manager": 25, "Systems Administrator": 20}),
            ("Innovating new approaches to technical challenges",
             {"Software Developer": 15, "Data Scientist": 15, "Research Scientist": 20}),
        ]),
    ),
)

CREATIVE = OverlapCluster(
    category="creative",
    member_titles=("Graphic Designer", "Art Director", "UX/UI Designer", "Digital Content Creator"),
    questions=(
        _question("creative-1", "What kind of creative process do you prefer?", [
            ("Creating visuals that communicate specific messages",
             {"Graphic Designer": 30, "Marketing Specialist": 10}),
            ("Directing the overall visual strategy and creative vision",
             {"Art Director": 30, "Creative Director": 20}),
            ("Designing functional and beautiful digital experiences", {"UX/UI Designer": 30, "Web Designer": 20}),
            ("Producing content that entertains or educates an audience",
             {"Digital Content Creator": 30, "Media Production": 20}),
            ("Crafting a cohesive brand identity across multiple platforms",
             {"Graphic Designer": 15, "Art Director": 15, "Brand Manager": 20}),
        ]),
        _question("creative-2", "What's most important to you in your creative work?", [
            ("Technical execution and visual impact", {"Graphic Designer": 25, "Photographer": 15}),
            ("Strategic direction and consistent visual storytelling", {"Art Director": 25, "Brand Manager": 15}),
            ("User experience and intuitive interaction", {"UX/UI Designer": 25, "Product Designer": 15}),
            ("Audience engagement and response", {"Digital Content Creator": 25, "Social Media Manager": 15}),
            ("Innovation and pushing creative boundaries", {"Art Director": 20, "Creative Director": 20}),
        ]),
    ),
)

HEALTHCARE = OverlapCluster(
    category="healthcare",
    member_titles=("Physician", "Medical Researcher", "Healthcare Administrator", "Nurse"),
    questions=(
        _question("healthcare-1", "What aspect of healthcare interests you most?", [
            ("Diagnosing and treating patients directly", {"Physician": 30, "Nurse Practitioner": 15}),
            ("Discovering new treatments through research",
             {"Medical Researcher": 30, "Biomedical Engineer": 15}),
            ("Improving healthcare systems and operations",
             {"Healthcare Administrator": 30, "Health Policy Analyst": 15}),
            ("Providing consistent care and patient support", {"Nurse": 30, "Physician Assistant": 15}),
            ("Focusing on preventive health and wellness", {"Physician": 15, "Public Health Specialist": 25}),
        ]),
        _question("healthcare-2", "How would you prefer to improve healthcare outcomes?", [
            ("Through direct clinical intervention and patient care", {"Physician": 25, "Surgeon": 20}),
            ("By conducting studies that advance medical knowledge",
             {"Medical Researcher": 25, "Epidemiologist": 15}),
            ("By making healthcare delivery more efficient and accessible",
             {"Healthcare Administrator": 25, "Health Information Manager": 15}),
            ("Through compassionate, continuous patient support", {"Nurse": 25, "Mental Health Counselor": 10}),
            ("By applying technology to healthcare challenges",
             {"Medical Researcher": 15, "Health Informatics Specialist": 25}),
        ]),
    ),
)

EDUCATION = OverlapCluster(
    category="education",
    member_titles=("Teacher", "Education Administrator", "Curriculum Developer", "Educational Consultant"),
    questions=(
        _question("education-1", "What educational role do you find most fulfilling?", [
            ("Teaching students directly in a classroom setting", {"Teacher": 30, "University Professor": 15}),
            ("Leading educational institutions and programs",
             {"Education Administrator": 30, "School Principal": 20}),
            ("Designing educational content and learning experiences",
             {"Curriculum Developer": 30, "Instructional Designer": 20}),
            ("Advising on educational improvements and best practices",
             {"Educational Consultant": 30, "Education Policy Analyst": 15}),
            ("Supporting students with specialized learning needs",
             {"Teacher": 15, "Special Education Specialist": 25}),
        ]),
        _question("education-2", "What educational approach resonates with you most?", [
            ("Personalized, hands-on instruction tailored to individual needs",
             {"Teacher": 25, "Learning Specialist": 20}),
            ("Creating systems that support educational excellence",
             {"Education Administrator": 25, "Education Program Director": 20}),
            ("Developing innovative learning materials and methods",
             {"Curriculum Developer": 25, "Educational Content Creator": 20}),
            ("Analyzing and applying research to improve education",
             {"Educational Consultant": 25, "Educational Researcher": 20}),
            ("Using technology to enhance teaching and learning",
             {"Curriculum Developer": 15, "Educational Technology Specialist": 25}),
        ]),
    ),
)

# Declaration order decides the order flagged categories are reported in
OVERLAP_CLUSTERS = (BUSINESS_MANAGEMENT, TECHNOLOGY, CREATIVE, HEALTHCARE, EDUCATION)
