# sample_packages.py
# Sample Kerala package data for loading into the database

from datetime import date, timedelta

# Departures every two weeks for the next six months
today = date.today()
departures = [today + timedelta(days=14 * i) for i in range(1, 13)]


def _dates(slots):
    return [{'date': d.isoformat(), 'slotsAvailable': slots} for d in departures]


SAMPLE_PACKAGES = [
    # 1. Munnar
    {
        'title': 'Munnar Tea Hills Escape',
        'description': 'Misty hills, rolling tea estates and cool mountain air. Stay in a hillside resort, walk through plantations and catch the sunrise from Top Station.',
        'pricePerHead': 5000,
        'duration': '3 Days / 2 Nights',
        'images': [
            'https://images.unsplash.com/photo-1593693411515-c20261bcad6e',
        ],
        'itinerary': [
            {'day': 1, 'title': 'Arrival in Munnar', 'description': 'Pickup from Kochi, drive via Cheeyappara waterfalls, check in and evening at leisure.'},
            {'day': 2, 'title': 'Tea country', 'description': 'Eravikulam National Park, Tea Museum, Mattupetty Dam and Echo Point.'},
            {'day': 3, 'title': 'Top Station and departure', 'description': 'Early sunrise at Top Station, breakfast and drop back to Kochi.'},
        ],
        'inclusions': ['Hotel accommodation', 'Breakfast daily', 'Private cab with driver', 'Sightseeing as per itinerary'],
        'exclusions': ['Flights and trains', 'Entry tickets', 'Lunch and dinner', 'Personal expenses'],
        'availableDates': _dates(12),
    },

    # 2. Alleppey
    {
        'title': 'Alleppey Backwater Houseboat',
        'description': 'A night aboard a traditional kettuvallam drifting through the backwaters of Kuttanad, with home-cooked Kerala meals on deck.',
        'pricePerHead': 6500,
        'duration': '2 Days / 1 Night',
        'images': [
            'https://images.unsplash.com/photo-1602216056096-3b40cc0c9944',
        ],
        'itinerary': [
            {'day': 1, 'title': 'Board the houseboat', 'description': 'Board at noon in Alleppey, lunch on board, cruise through paddy fields and village canals.'},
            {'day': 2, 'title': 'Sunrise cruise', 'description': 'Morning cruise, breakfast on deck and disembark by 9 AM.'},
        ],
        'inclusions': ['Private houseboat', 'All meals on board', 'Welcome drink'],
        'exclusions': ['Transfers to Alleppey', 'Shikara rides', 'Personal expenses'],
        'availableDates': _dates(8),
    },

    # 3. Wayanad
    {
        'title': 'Wayanad Forest Trails',
        'description': 'Caves, waterfalls and wildlife in the green highlands of Wayanad, with a stay in a plantation homestay.',
        'pricePerHead': 7200,
        'duration': '4 Days / 3 Nights',
        'images': [
            'https://images.unsplash.com/photo-1580619305218-8423a7ef79b4',
        ],
        'itinerary': [
            {'day': 1, 'title': 'Arrival in Wayanad', 'description': 'Pickup from Kozhikode, drive up the Thamarassery ghat, check in to the homestay.'},
            {'day': 2, 'title': 'Edakkal Caves', 'description': 'Hike to the Edakkal Caves and visit Soochipara waterfalls.'},
            {'day': 3, 'title': 'Wildlife safari', 'description': 'Morning jeep safari in Muthanga and an afternoon at Banasura Sagar Dam.'},
            {'day': 4, 'title': 'Departure', 'description': 'Breakfast and drop at Kozhikode.'},
        ],
        'inclusions': ['Homestay accommodation', 'Breakfast and dinner', 'Private cab', 'Jeep safari'],
        'exclusions': ['Flights and trains', 'Camera fees', 'Personal expenses'],
        'availableDates': _dates(10),
    },

    # 4. Kerala circuit
    {
        'title': 'Grand Kerala Circuit',
        'description': 'Munnar, Thekkady, Alleppey and Kovalam in one trip: hills, spice gardens, backwaters and beaches.',
        'pricePerHead': 18500,
        'duration': '7 Days / 6 Nights',
        'images': [
            'https://images.unsplash.com/photo-1609340667440-d1f4e8e9e40e',
        ],
        'itinerary': [
            {'day': 1, 'title': 'Kochi to Munnar', 'description': 'Pickup in Kochi, drive to Munnar.'},
            {'day': 2, 'title': 'Munnar sightseeing', 'description': 'Tea gardens, Eravikulam and Mattupetty.'},
            {'day': 3, 'title': 'Thekkady', 'description': 'Spice plantation tour and evening Kathakali show.'},
            {'day': 4, 'title': 'Periyar', 'description': 'Boat ride on Periyar lake and transfer to Alleppey.'},
            {'day': 5, 'title': 'Houseboat', 'description': 'Overnight houseboat cruise on the backwaters.'},
            {'day': 6, 'title': 'Kovalam', 'description': 'Drive to Kovalam, evening at Lighthouse Beach.'},
            {'day': 7, 'title': 'Departure', 'description': 'Drop at Trivandrum airport.'},
        ],
        'inclusions': ['Hotels and one houseboat night', 'Breakfast daily', 'All meals on houseboat', 'Private cab with driver'],
        'exclusions': ['Flights', 'Entry tickets and show tickets', 'Personal expenses'],
        'availableDates': _dates(15),
    },
]
