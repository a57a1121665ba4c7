from interview_coach.app import main

main()
