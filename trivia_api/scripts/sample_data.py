SAMPLE_QUESTIONS = [
    {
        "question": "What is the capital of France?",
        "options": ["London", "Berlin", "Paris", "Madrid"],
        "correctAnswer": "Paris",
    },
    {
        "question": "Which planet is known as the Red Planet?",
        "options": ["Venus", "Mars", "Jupiter", "Saturn"],
        "correctAnswer": "Mars",
    },
    {
        "question": "What is the largest mammal in the world?",
        "options": ["African Elephant", "Blue Whale", "Giraffe", "Polar Bear"],
        "correctAnswer": "Blue Whale",
    },
    {
        "question": "Who painted the Mona Lisa?",
        "options": ["Vincent van Gogh", "Pablo Picasso", "Leonardo da Vinci", "Michelangelo"],
        "correctAnswer": "Leonardo da Vinci",
    },
    {
        "question": "What is the chemical symbol for gold?",
        "options": ["Ag", "Fe", "Au", "Cu"],
        "correctAnswer": "Au",
    },
    {
        "question": "How many continents are there on Earth?",
        "options": ["5", "6", "7", "8"],
        "correctAnswer": "7",
    },
    {
        "question": "What is the largest ocean on Earth?",
        "options": ["Atlantic Ocean", "Indian Ocean", "Arctic Ocean", "Pacific Ocean"],
        "correctAnswer": "Pacific Ocean",
    },
    {
        "question": "Which animal is known as the 'King of the Jungle'?",
        "options": ["Tiger", "Elephant", "Lion", "Bear"],
        "correctAnswer": "Lion",
    },
    {
        "question": "What is the square root of 144?",
        "options": ["10", "12", "14", "16"],
        "correctAnswer": "12",
    },
    {
        "question": "Which famous scientist developed the theory of relativity?",
        "options": ["Isaac Newton", "Albert Einstein", "Galileo Galilei", "Stephen Hawking"],
        "correctAnswer": "Albert Einstein",
    },
    {
        "question": "What is the largest desert in the world?",
        "options": ["Sahara Desert", "Antarctic Polar Desert", "Arabian Desert", "Gobi Desert"],
        "correctAnswer": "Antarctic Polar Desert",
    },
    {
        "question": "In which country is the Great Wall located?",
        "options": ["India", "Japan", "China", "Vietnam"],
        "correctAnswer": "China",
    },
]

# Demo leaderboard; scores are set directly here, which only seeding may do
SAMPLE_PEOPLE = [
    {"name": "Ann", "age": 29, "gender": "female", "avatar": "", "score": 1200},
    {"name": "Minh", "age": 34, "gender": "male", "avatar": "", "score": 900},
    {"name": "Sasha", "age": 22, "gender": "other", "avatar": "", "score": 1500},
    {"name": "Linh", "age": 41, "gender": "female", "avatar": "", "score": 300},
    {"name": "Tom", "age": 19, "gender": "male", "avatar": "", "score": 0},
]
