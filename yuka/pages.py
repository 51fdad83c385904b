"""Static marketing pages shown around the booking flow."""

from __future__ import annotations

from enum import Enum

from rich.text import Text


class SitePage(str, Enum):
    HOME = "home"
    ABOUT = "about"
    MENU = "menu"
    BLOG = "blog"
    BOOKING = "booking"


PAGE_TITLES: dict[SitePage, str] = {
    SitePage.HOME: "Home",
    SitePage.ABOUT: "About",
    SitePage.MENU: "Menu",
    SitePage.BLOG: "Blog",
    SitePage.BOOKING: "Book a Spot",
}

HOME_COPY = (
    "Yuka Coffee\n\n"
    "Specialty coffee, fresh bakes and a seat by the window.\n"
    "Reserve your table and pre-order your favorite drinks and snacks.\n\n"
    "Press F5 to book a spot."
)

ABOUT_COPY = (
    "Our Story\n\n"
    "At Yuka Coffee, we believe in the transformative power of a perfectly crafted cup.\n"
    "We source our beans from sustainable farms around the world, ensuring that each\n"
    "cup tells a story of care from farm to table.\n\n"
    "Quality   We never compromise on the quality of our ingredients.\n"
    "Community We believe in creating a welcoming space for people to gather.\n"
    "Planet    We're committed to environmentally responsible practices."
)

# Full cafe menu (prices in Rs.; ranges are small/large).
CAFE_MENU: dict[str, list[tuple[str, str]]] = {
    "Popular Items": [
        ("Iced Spanish Latte", "600"),
        ("Salted Caramel Frappe", "690"),
        ("Mocha Frappe", "690"),
        ("Iced Italian Vanilla Latte", "620"),
        ("Iced Turk Hazelnut Latte", "650"),
        ("Caramel Frappe", "690"),
    ],
    "Hot Coffee": [
        ("Espresso", "320-400"),
        ("Americano", "320-400"),
        ("Cortado", "360-450"),
        ("Cappucino", "432-540"),
        ("Latte", "432-540"),
        ("Spanish Latte", "480-600"),
        ("Mocha Latte", "480-600"),
        ("Coconut Creme", "480-600"),
        ("Italian Vanilla Latte", "496-620"),
        ("White Double Shot Mocha", "496-620"),
        ("Salted Caramel", "464-580"),
        ("Caramel Latte", "464-580"),
        ("Turk Hazelnut Latte", "520-650"),
    ],
    "Iced Coffee": [
        ("Iced Latte", "540"),
        ("Iced Coconut Creme Latte", "600"),
        ("Iced Spanish Latte", "600"),
        ("Iced Italian Vanilla Latte", "620"),
        ("Iced Mocha", "630"),
        ("Iced Salted Caramel Latte", "650"),
        ("Iced Doubleshot White Mocha", "620"),
        ("Iced Americano", "440"),
        ("Iced Turk Hazelnut Latte", "650"),
        ("Ice Caramel Lattee", "650"),
    ],
    "Frappes": [
        ("Salted Caramel Frappe", "690"),
        ("Hazelnut Frappe", "690"),
        ("Vanilla Cloud Frappe", "690"),
        ("White Double Shot Mocha Frappe", "690"),
        ("Coconut Creme Frappe", "690"),
        ("Mocha Frappe", "690"),
        ("Lindth Mandarin Frappe", "730"),
        ("Choco Dream Frappe", "730"),
        ("Caramel Frappe", "690"),
    ],
    "Drip Coffee": [
        ("V60", "620"),
        ("Iced V60", "640"),
    ],
    "Hot Chocolate": [
        ("Hot Chocolate", "580"),
    ],
    "Iced Tea": [
        ("Mandarin Iced Tea", "440-550"),
        ("Blackberry Iced Tea", "440-550"),
        ("Hunza Cherry Iced Tea", "440-550"),
    ],
    "Specialty Drinks": [
        ("Honey Hot Matcha", "620"),
        ("Strawberry Iced Matcha", "620"),
        ("Vanilla Iced Matcha", "620"),
        ("Coconut Iced Matcha", "620"),
    ],
    "Dessert Bar": [
        ("Fudge Brownies", "350"),
        ("Loaded Chocolate Chunk Cookie", "390"),
        ("Double Chocolate Cookie", "390"),
        ("Lotus Biscoff Filled Cookie", "450"),
        ("San Sebastian Cheesecake", "650"),
    ],
}

BLOG_POSTS: list[tuple[str, str]] = [
    (
        "The Complete Guide to Coffee Brewing Methods",
        "Discover the subtle differences between pour-over, French press, espresso, and more brewing techniques.",
    ),
    (
        "Understanding Coffee Bean Varieties",
        "Learn about the distinct characteristics of Arabica, Robusta, and other coffee bean varieties.",
    ),
    (
        "5 Cold Brew Recipes Perfect for Summer",
        "Beat the Karachi heat with these refreshing cold brew variations you can make at home.",
    ),
    (
        "The Art of Coffee Tasting: A Beginner's Guide",
        "Learn how to identify different flavor notes and aromas in your coffee like a professional.",
    ),
    (
        "Perfect Your Home Cold Brew: Tips and Tricks",
        "Get the smoothest, richest cold brew at home with our expert brewing guide.",
    ),
    (
        "Coffee-Infused Desserts to Try at Home",
        "From tiramisu to chocolate espresso cookies, these coffee-flavored treats are perfect for any occasion.",
    ),
]


def render_page(page: SitePage) -> Text:
    """Render a static page body; the booking page is rendered by the app."""
    if page is SitePage.HOME:
        return Text(HOME_COPY)
    if page is SitePage.ABOUT:
        return Text(ABOUT_COPY)
    if page is SitePage.MENU:
        text = Text()
        for idx, (section, items) in enumerate(CAFE_MENU.items()):
            if idx > 0:
                text.append("\n")
            text.append(f"{section}\n", style="bold underline")
            for name, price in items:
                text.append(f"  {name:<32}Rs. {price}\n")
        return text
    if page is SitePage.BLOG:
        text = Text()
        for title, teaser in BLOG_POSTS:
            text.append(f"{title}\n", style="bold")
            text.append(f"  {teaser}\n\n", style="dim")
        return text
    return Text("")


def format_nav(current: SitePage) -> Text:
    """Render the header navigation with function-key hints."""
    text = Text()
    for idx, page in enumerate(SitePage):
        if idx > 0:
            text.append("  ")
        label = f"F{idx + 1} {PAGE_TITLES[page]}"
        if page is current:
            text.append(label, style="bold #000000 on #fe8c01")
        else:
            text.append(label)
    return text
