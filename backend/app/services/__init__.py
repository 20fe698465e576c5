"""
Services package - Core business logic and integrations

Organized by domain responsibility:

Pipeline (Per-video Infographic Flow):
    - pipeline/transcript: Transcript scraping and caching
    - pipeline/content_analysis: Key-points report and design prompt
    - pipeline/image_generation: Image synthesis
    - pipeline/playlist_extraction: Playlist scraping

Infrastructure (Technical Concerns):
    - infrastructure/storage: Data persistence
    - infrastructure/orchestration: Jobs, per-video state machine, job credentials

LLM:
    - llm: Gemini/OpenAI providers with fallback

Credentials:
    - credentials: Plan-based API key resolution

Use Cases (Application Layer):
    - use_cases: Business logic orchestration

Architecture Principles:
    - Single Responsibility: Each module/file does one thing
    - Dependency Injection: Services accept dependencies
    - Async-first: All network I/O uses async/await
"""
