"""Project type selection and persistence for crowdfunding projects."""
