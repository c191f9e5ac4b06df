SAMPLE_LISTINGS = [
    {
        "title": "Cozy Beachfront Cottage",
        "description": "Escape to this charming beachfront cottage for a relaxing getaway. Enjoy stunning ocean views and easy access to the beach.",
        "image_url": "https://images.unsplash.com/photo-1552733407-5d5c46c3bb3b?auto=format&fit=crop&w=800&q=60",
        "price": "1500.00",
        "location": "Malibu",
        "country": "United States",
    },
    {
        "title": "Modern Loft in Downtown",
        "description": "Stay in the heart of the city in this stylish loft apartment. Perfect for urban explorers!",
        "image_url": "https://images.unsplash.com/photo-1501785888041-af3ef285b470?auto=format&fit=crop&w=800&q=60",
        "price": "1200.00",
        "location": "New York City",
        "country": "United States",
    },
    {
        "title": "Mountain Retreat",
        "description": "Unplug and unwind in this peaceful mountain cabin. Surrounded by nature, it's a perfect place to recharge.",
        "image_url": "https://images.unsplash.com/photo-1571896349842-33c89424de2d?auto=format&fit=crop&w=800&q=60",
        "price": "1000.00",
        "location": "Aspen",
        "country": "United States",
    },
    {
        "title": "Historic Villa in Tuscany",
        "description": "Experience the charm of Tuscany in this beautifully restored villa. Explore the rolling hills and vineyards.",
        "image_url": "https://images.unsplash.com/photo-1566073771259-6a8506099945?auto=format&fit=crop&w=800&q=60",
        "price": "2500.00",
        "location": "Florence",
        "country": "Italy",
    },
    {
        "title": "Secluded Treehouse Getaway",
        "description": "Live among the treetops in this unique treehouse retreat. A true nature lover's paradise.",
        "image_url": "https://images.unsplash.com/photo-1488462237308-ecaa28b729d7?auto=format&fit=crop&w=800&q=60",
        "price": "800.00",
        "location": "Portland",
        "country": "United States",
    },
    {
        "title": "Beachfront Paradise",
        "description": "Step out of your door onto the sandy beach. This beachfront condo offers the ultimate relaxation.",
        "image_url": "",
        "price": "2000.00",
        "location": "Cancun",
        "country": "Mexico",
    },
    {
        "title": "Rustic Cabin by the Lake",
        "description": "Spend your days fishing and kayaking on the serene lake. This cozy cabin is perfect for outdoor enthusiasts.",
        "image_url": "https://images.unsplash.com/photo-1470770841072-f978cf4d019e?auto=format&fit=crop&w=800&q=60",
        "price": "900.00",
        "location": "Lake Tahoe",
        "country": "United States",
    },
    {
        "title": "Luxury Penthouse with City Views",
        "description": "Indulge in luxury living with panoramic city views from this stunning penthouse apartment.",
        "image_url": "https://images.unsplash.com/photo-1622396481328-9b1b78cdd9fd?auto=format&fit=crop&w=800&q=60",
        "price": "3500.00",
        "location": "Los Angeles",
        "country": "United States",
    },
]
