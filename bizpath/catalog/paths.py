"""The business paths the fit scorer ranks.

Order matters: ranking is a stable sort, so paths with equal fit scores keep
the order they have here.
"""

from __future__ import annotations

from bizpath.catalog.models import BusinessPath

BUSINESS_PATHS: tuple[BusinessPath, ...] = (
    BusinessPath(
        id="content-creation-ugc",
        name="Content Creation / UGC",
        description=(
            "Create videos, photos, blogs, or social media posts for personal "
            "brands or other businesses"
        ),
        difficulty="Easy",
        time_to_profit="2-4 weeks",
        startup_cost="$0-300",
        potential_income="$0-20K/month",
        market_size="Creator economy valued at over $104B",
        skills=(
            "Creative thinking",
            "Communication",
            "Social media",
            "Visual storytelling",
            "Trend awareness",
        ),
        tools=("CapCut", "Canva", "TikTok", "Instagram", "Notion"),
    ),
    BusinessPath(
        id="freelancing",
        name="Freelancing",
        description=(
            "Offer specialized services to clients on a project or contract basis"
        ),
        difficulty="Easy",
        time_to_profit="1-2 weeks",
        startup_cost="$0-500",
        potential_income="$1K-15K+/month",
        market_size="Freelance economy worth $400B+ globally",
        skills=(
            "Specialized expertise",
            "Client communication",
            "Project management",
            "Time management",
            "Networking",
        ),
        tools=("Upwork", "Fiverr", "LinkedIn", "Slack", "Zoom"),
    ),
    BusinessPath(
        id="affiliate-marketing",
        name="Affiliate Marketing",
        description="Promote other people's products and earn commission on sales",
        difficulty="Easy",
        time_to_profit="3-6 months",
        startup_cost="$50-500",
        potential_income="$100-10K+/month",
        market_size="$15.7B industry, projected to reach $36.9B by 2030",
        skills=(
            "Content creation",
            "SEO",
            "Traffic generation",
            "Conversion optimization",
            "Audience building",
        ),
        tools=("WordPress", "ConvertKit", "Canva", "Ahrefs"),
    ),
    BusinessPath(
        id="e-commerce-dropshipping",
        name="E-commerce / Dropshipping",
        description=(
            "Sell products online without holding inventory through supplier "
            "partnerships"
        ),
        difficulty="Medium",
        time_to_profit="2-6 months",
        startup_cost="$500-3K",
        potential_income="$1K-50K+/month",
        market_size="Global e-commerce market worth $6.2T, growing 10% annually",
        skills=(
            "Product research",
            "Digital marketing",
            "Customer service",
            "Supplier management",
            "Analytics",
        ),
        tools=("Shopify", "Oberlo", "Facebook Ads", "Google Ads", "AliExpress"),
    ),
    BusinessPath(
        id="virtual-assistant",
        name="Virtual Assistant",
        description=(
            "Provide remote administrative support to entrepreneurs and businesses"
        ),
        difficulty="Easy",
        time_to_profit="1-2 weeks",
        startup_cost="$0-100",
        potential_income="$500-5K/month",
        market_size="Virtual assistant market growing 34% annually, worth $25B+",
        skills=(
            "Organization",
            "Communication",
            "Time management",
            "Tech proficiency",
            "Problem-solving",
        ),
        tools=("Google Workspace", "Notion", "Trello", "Slack", "Zoom"),
    ),
    BusinessPath(
        id="online-coaching-consulting",
        name="Online Coaching / Consulting",
        description=(
            "Provide expertise and guidance to clients in your area of "
            "specialization"
        ),
        difficulty="Medium",
        time_to_profit="1-3 months",
        startup_cost="$100-1K",
        potential_income="$2K-25K+/month",
        market_size="Global coaching market worth $20B+, growing 6% annually",
        skills=(
            "Subject expertise",
            "Communication",
            "Problem-solving",
            "Program development",
            "Client management",
        ),
        tools=("Zoom", "Calendly", "Teachable", "Stripe", "Notion"),
    ),
    BusinessPath(
        id="print-on-demand",
        name="Print on Demand",
        description=(
            "Create and sell custom designs on products without inventory "
            "management"
        ),
        difficulty="Easy",
        time_to_profit="2-4 months",
        startup_cost="$0-500",
        potential_income="$200-5K+/month",
        market_size="Print-on-demand market worth $4.9B, growing 26% annually",
        skills=(
            "Graphic design",
            "Market research",
            "Trend awareness",
            "Basic marketing",
            "Brand development",
        ),
        tools=("Canva", "Photoshop", "Printful", "Etsy", "Amazon Merch"),
    ),
    BusinessPath(
        id="youtube-automation",
        name="YouTube Automation Channels",
        description=(
            "Build faceless YouTube channels where content is outsourced to a team"
        ),
        difficulty="Medium",
        time_to_profit="3-6 months",
        startup_cost="$300-3K",
        potential_income="$500-15K/month",
        market_size="YouTube generates $28B+ annually",
        skills=(
            "Strategic planning",
            "Team management",
            "SEO",
            "Analytics",
            "Trend recognition",
        ),
        tools=("VidIQ", "Pictory", "Fiverr", "Google Docs"),
    ),
    BusinessPath(
        id="local-service-arbitrage",
        name="Local Service Arbitrage",
        description=(
            "Generate leads for local services and hire others to fulfill the work"
        ),
        difficulty="Medium",
        time_to_profit="2-8 weeks",
        startup_cost="$100-1K",
        potential_income="$1K-10K/month",
        market_size="Local services market worth $400B+ annually",
        skills=(
            "Sales",
            "Communication",
            "Lead generation",
            "Vendor management",
            "Customer service",
        ),
        tools=("Google Ads", "Jobber", "Stripe", "Thumbtack"),
    ),
    BusinessPath(
        id="high-ticket-sales",
        name="High-Ticket Sales / Closing",
        description=(
            "Sell expensive products or services over phone/Zoom for commission"
        ),
        difficulty="Medium",
        time_to_profit="2-6 weeks",
        startup_cost="$0-200",
        potential_income="$3K-30K+/month",
        market_size="High-ticket coaching/consulting market worth $15B+",
        skills=(
            "Communication",
            "Persuasion",
            "Objection handling",
            "Emotional intelligence",
            "Follow-up",
        ),
        tools=("Zoom", "Close.io", "Slack", "Calendly"),
    ),
    BusinessPath(
        id="app-saas-development",
        name="App or SaaS Development",
        description=(
            "Create tech-based products with subscription or license monetization"
        ),
        difficulty="Hard",
        time_to_profit="6-18 months",
        startup_cost="$1K-15K",
        potential_income="$1K-100K+/month",
        market_size="Global SaaS market worth $195B and growing",
        skills=(
            "Programming",
            "Product thinking",
            "UX/UI design",
            "Problem solving",
            "Market validation",
        ),
        tools=("React", "Vercel", "Supabase", "Stripe", "Figma"),
    ),
)

_BY_ID: dict[str, BusinessPath] = {path.id: path for path in BUSINESS_PATHS}


def business_path_ids() -> list[str]:
    """Return catalog path ids in catalog order."""
    return [path.id for path in BUSINESS_PATHS]


def get_business_path(path_id: str) -> BusinessPath:
    """Return the catalog entry for `path_id`.

    Raises:
        KeyError: If the id is not in the catalog.
    """
    try:
        return _BY_ID[path_id]
    except KeyError:
        raise KeyError(f"Unknown business path: {path_id!r}") from None
