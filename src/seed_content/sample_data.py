"""Sample records for a fresh site."""

ARTICLES = [
    {
        "title": "UCSD Announces New Sustainability Initiative",
        "excerpt": "The university launches a comprehensive plan to achieve carbon neutrality by 2030.",
        "content": (
            "<p>UC San Diego has announced a sustainability initiative that aims to make the campus "
            "carbon neutral by 2030. The plan covers renewable energy, green building standards and "
            "new transportation options for students and staff.</p>"
        ),
        "category": "campus",
        "section": "campus",
        "author_name": "Sarah Johnson",
        "cover_image": "https://picsum.photos/800/400?random=1",
        "featured": True,
        "status": "published",
    },
    {
        "title": "Student Government Elections: What You Need to Know",
        "excerpt": "Everything about the upcoming AS elections and how to get involved.",
        "content": (
            "<p>The Associated Students elections are around the corner, with candidates competing "
            "for every executive office. Here is how voting works and where to meet the candidates.</p>"
        ),
        "category": "student-government",
        "section": "student-government",
        "author_name": "Michael Chen",
        "cover_image": "https://picsum.photos/800/400?random=2",
        "featured": True,
        "status": "published",
    },
    {
        "title": "Tritons Basketball Team Advances to Championship",
        "excerpt": "Historic victory secures spot in conference finals for the first time in a decade.",
        "content": (
            "<p>In an overtime thriller, the Tritons secured their place in the conference "
            "championship game for the first time in over a decade.</p>"
        ),
        "category": "sports",
        "section": "sports",
        "author_name": "David Rodriguez",
        "cover_image": "https://picsum.photos/800/400?random=3",
        "featured": True,
        "status": "published",
    },
]

VIDEOS = [
    {
        "title": "Campus Tour: Hidden Gems of UCSD",
        "description": "Join us on a tour of the most beautiful and lesser-known spots on campus.",
        "category": "Campus",
        "author_name": "Campus Media Team",
        "thumbnail_url": "https://picsum.photos/400/600?random=5",
        "video_url": "https://sample-videos.com/zip/10/mp4/SampleVideo_1280x720_1mb.mp4",
        "duration": 45,
        "views": 1250,
        "featured": True,
        "status": "published",
    },
    {
        "title": "Interview: Student Body President",
        "description": "Exclusive interview with the current AS President about upcoming initiatives.",
        "category": "Interview",
        "author_name": "News Team",
        "thumbnail_url": "https://picsum.photos/400/600?random=6",
        "video_url": "https://sample-videos.com/zip/10/mp4/SampleVideo_1280x720_1mb.mp4",
        "duration": 60,
        "views": 890,
        "featured": True,
        "status": "published",
    },
]

RESEARCH = [
    {
        "title": "Breakthrough in Alzheimer's Research",
        "abstract": "Novel approach to early detection shows promising results in clinical trials.",
        "content": (
            "<p>Researchers have developed a method for early detection of Alzheimer's disease that "
            "showed high accuracy in clinical trials.</p>"
        ),
        "department": "Neuroscience",
        "author_name": "Dr. Jennifer Martinez",
        "cover_image": "https://picsum.photos/800/400?random=9",
        "contributors": ["Dr. Robert Kim", "Dr. Lisa Wang"],
        "featured": True,
        "status": "published",
    },
    {
        "title": "Climate Change Impact on Marine Ecosystems",
        "abstract": "Study reveals significant changes in Pacific Ocean biodiversity patterns.",
        "content": (
            "<p>A long-running survey of Pacific Ocean ecosystems documents shifts in biodiversity "
            "linked to warming waters.</p>"
        ),
        "department": "Marine Biology",
        "author_name": "Dr. Carlos Mendez",
        "cover_image": "https://picsum.photos/800/400?random=10",
        "contributors": ["Dr. Sarah Thompson", "Dr. James Wilson"],
        "featured": True,
        "status": "published",
    },
]

LEGAL_ARTICLES = [
    {
        "title": "Free Speech on Campus: Recent Developments",
        "abstract": "Analysis of recent court decisions affecting student expression rights.",
        "content": "<p>Recent court decisions have reshaped free speech on college campuses.</p>",
        "category": "Constitutional Law",
        "author_name": "Prof. Daniel Lee",
        "cover_image": "https://picsum.photos/800/400?random=12",
        "featured": True,
        "status": "published",
    },
    {
        "title": "Student Privacy Rights in the Digital Age",
        "abstract": "Examining how new technologies affect student privacy protections.",
        "content": "<p>As universities adopt new digital tools, student data protections are under review.</p>",
        "category": "Privacy Law",
        "author_name": "Prof. Rachel Green",
        "cover_image": "https://picsum.photos/800/400?random=13",
        "featured": True,
        "status": "published",
    },
]

# expires_in_days is turned into expires_at when seeding.
NEWS_TICKERS = [
    {
        "text": "BREAKING: UC San Diego announces new research initiative in renewable energy",
        "priority": "breaking",
        "link": "https://ucsd.edu",
        "expires_in_days": 7,
    },
    {
        "text": "Tritons basketball team advances to championship finals",
        "priority": "high",
        "link": "https://ucsdtritons.com",
        "expires_in_days": 3,
    },
    {
        "text": "Campus construction update: New student center opening next month",
        "priority": "medium",
        "expires_in_days": 14,
    },
    {
        "text": "Student government elections: Voting opens tomorrow",
        "priority": "high",
        "expires_in_days": 2,
    },
    {
        "text": "Weather alert: Rain expected on campus this weekend",
        "priority": "low",
        "expires_in_days": 5,
    },
]
