"""Static landing-page catalog: feature tiles and expert product picks."""

from typing import List

from petgadget.models.catalog import ExpertProduct, ProductFeature

FEATURES: List[ProductFeature] = [
    ProductFeature(
        img_src="/images/dog6.png",
        heading="Portion Control",
        subheading="Exact dietary requirements for pet care",
        path="/search/portion%20control",
    ),
    ProductFeature(
        img_src="/images/dog5.png",
        heading="Smart App",
        subheading="Pet supplies that say which pet ate how much",
        path="/search/smart%20app",
    ),
    ProductFeature(
        img_src="/images/Best-Automatic-Cat-Feeder-with-a-Timer-for-Precise-Wet-Food-Feeding-Schedules.png",
        heading="Timers",
        subheading="Feeding schedules for pet friendly supplies",
        path="/search/timers",
    ),
    ProductFeature(
        img_src="/images/dog4.png",
        heading="Two-Way Audio",
        subheading="Communicate with your pet using your pet feeder",
        path="/search/two-way%20audio",
    ),
]

EXPERT_PRODUCTS: List[ExpertProduct] = [
    ExpertProduct(
        profession="Automatic Cat Feeder",
        name="PETLIBRO",
        img_src="https://m.media-amazon.com/images/I/41IyqubT+HL._SL500_.jpg",
        product_link="https://www.amazon.com/dp/B0B1TMLL3F",
        price="$69.99",
        features=[
            "Smart APP Control: Wi-Fi enabled for remote feeding",
            "10 meals per day with 1-48 portions per meal",
            "10-second voice recording for meal calls",
            "5L capacity with freshness preservation",
        ],
    ),
    ExpertProduct(
        profession="Automatic Feeder",
        name="IMIPAW",
        img_src="https://m.media-amazon.com/images/I/31smh+Fyk0L._SL500_.jpg",
        product_link="https://www.amazon.com/dp/B0BR5VST5N",
        price="$35.99",
        features=[
            "Programmable timed feeding",
            "3L/12 cup capacity",
            "Dual power supply (adapter + batteries)",
            "Easy to use LCD screen",
        ],
    ),
    ExpertProduct(
        profession="Automatic Feeder",
        name="VOLUAS",
        img_src="https://m.media-amazon.com/images/I/31FCol5w8TL._SL500_.jpg",
        product_link="https://www.amazon.com/dp/B09LD2CD1L",
        price="$54.99",
        features=[
            "4L/16.9 cup capacity",
            "Voice record meal call (10 seconds)",
            "1-4 meals with 0-40 portion choices",
            "Wired or battery power",
        ],
    ),
    ExpertProduct(
        profession="Dual Cat Feeder",
        name="oneisall",
        img_src="https://m.media-amazon.com/images/I/41IyqubT+HL._SL500_.jpg",
        product_link="https://www.amazon.com/dp/B0C5X2G933",
        price="$50.99",
        features=[
            "Designed for 2 cats (separate bowls)",
            "5L/20 cups capacity",
            "10-second voice recorder",
            "Up to 6 meals a day",
        ],
    ),
]
