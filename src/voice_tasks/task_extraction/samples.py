"""Sample transcript sentences for exercising the task extractor."""

SAMPLE_TRANSCRIPTS: tuple[str, ...] = (
    # Health-related tasks
    "I need to call my doctor tomorrow for a checkup",
    "Have to schedule a dentist appointment next week",
    "Must pick up my prescription from the pharmacy today",
    "Should book a therapy session for next month",
    "Want to make an appointment with the specialist",
    "Going to get my annual physical exam next week",
    "Need to schedule a follow-up with my doctor",
    "Have to get my flu shot this week",
    "Must book a dental cleaning for next month",
    "Should schedule my annual eye exam",

    # Work-related tasks
    "Need to prepare the quarterly report by Friday",
    "Have to schedule a meeting with the client next week",
    "Must submit the project proposal by next month",
    "Should organize the team building event",
    "Want to book a conference room for the presentation",
    "Going to prepare the budget presentation",
    "Need to call the IT support about the network issue",
    "Have to complete the project documentation",
    "Must schedule a meeting with HR",
    "Should organize the department files",

    # Personal tasks
    "Need to clean the house before the weekend",
    "Have to organize the garage this month",
    "Must call mom about the family dinner",
    "Should prepare dinner for the family tonight",
    "Want to clean the garden this weekend",
    "Going to organize my desk before the new project",
    "Need to call the plumber about the leaky faucet",
    "Have to clean the windows this week",
    "Must organize the family photos",
    "Should prepare the guest room for visitors",

    # Shopping tasks
    "Need to buy groceries after work today",
    "Have to purchase new shoes for the wedding",
    "Must get office supplies this week",
    "Should buy birthday presents for the kids",
    "Want to order new furniture for the living room",
    "Going to pick up the dry cleaning today",
    "Need to buy a new laptop for work",
    "Have to purchase groceries for the week",
    "Must get new clothes for the interview",
    "Should buy ingredients for dinner",

    # Tasks with specific dates
    "Need to call the doctor on January 15th, 2024",
    "Have to submit the report by 12/31/2023",
    "Must schedule the meeting for next Monday",
    "Should prepare the presentation by next Friday",
    "Want to book the appointment for this weekend",
    "Going to clean the house in 3 days",
    "Need to call the client after 2 weeks",
    "Have to complete the project in 1 month",
    "Must organize the files by next month",
    "Should prepare the documents by next week",

    # Complex tasks
    "Need to call the doctor tomorrow and schedule a follow-up for next month",
    "Have to prepare the presentation for the client meeting next week and book a conference room",
    "Must buy groceries today and prepare dinner for the family tonight",
    "Should clean the house this weekend and organize the garage next week",
    "Want to book a flight for the business trip next month and reserve a hotel room",
    "Going to prepare the quarterly report by Friday and schedule a team review next week",
    "Need to call the plumber about the leaky faucet and schedule a general maintenance check",
    "Have to organize the team building event for next month and book the venue",
    "Must prepare the budget presentation for tomorrow's meeting and send it to the team",
    "Should buy birthday presents for the kids and organize a surprise party",

    # Statements, mostly without tasks
    "The weather is nice today",
    "I like pizza",
    "This is a random statement",
    "The meeting was productive",
    "The project is going well",
    "The team is working hard",
    "The deadline is approaching",
    "The presentation was good",
    "The client is happy",
    "The report is complete",
)
