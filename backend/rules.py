# backend/rules.py
"""
Canned portfolio answers keyed by lexical patterns.

Rules are scanned top to bottom against the normalized message and the first
hit wins. Keyword classes overlap ("cloud service" matches both aws and
services), so table order is topic priority. The greeting rule is anchored at
the start of the message and sits first: "hi, what are your rates?" gets the
greeting, not the pricing answer.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from re import Pattern
from typing import Sequence, Tuple


@dataclass(frozen=True)
class Rule:
    name: str
    pattern: Pattern[str]
    reply: str

    def matches(self, normalized: str) -> bool:
        return self.pattern.search(normalized) is not None


def _rule(name: str, pattern: str, reply: str) -> Rule:
    return Rule(name=name, pattern=re.compile(pattern, re.IGNORECASE), reply=reply)


def normalize(message: str) -> str:
    return (message or "").lower().strip()


GREETING_REPLY = (
    "Hello! I'm Rayhan's assistant. I can help you learn about his DevOps expertise, "
    "services, and availability. What would you like to know?"
)

DEFAULT_REPLY = (
    "I can help you learn about:\n\n"
    "• Rayhan's skills and expertise\n"
    "• Services offered\n"
    "• Pricing and availability\n"
    "• Past projects\n"
    "• How to get in touch\n\n"
    "What would you like to know?"
)

RULES: Tuple[Rule, ...] = (
    _rule("greeting", r"^(hi|hello|hey|greetings)", GREETING_REPLY),
    _rule(
        "skills",
        r"skill|expertise|technology|tech stack|what.*know",
        "Rayhan specializes in:\n\n"
        "• Cloud Infrastructure: AWS (EC2, S3, Lambda, RDS, VPC)\n"
        "• Container Orchestration: Kubernetes, Docker\n"
        "• Infrastructure as Code: Terraform, CloudFormation\n"
        "• CI/CD: Jenkins, GitLab CI, GitHub Actions\n"
        "• Monitoring: Prometheus, Grafana, CloudWatch\n"
        "• Scripting: Python, Bash\n\n"
        "Would you like details on any specific area?",
    ),
    _rule(
        "aws",
        r"aws|amazon|cloud",
        "Rayhan has extensive AWS experience including:\n\n"
        "• Designing multi-AZ production environments\n"
        "• Cost optimization strategies\n"
        "• Security best practices (IAM, VPC, Security Groups)\n"
        "• Serverless architectures (Lambda, API Gateway)\n"
        "• Database management (RDS, DynamoDB)\n\n"
        "He can help migrate your infrastructure to AWS or optimize existing setups.",
    ),
    _rule(
        "containers",
        r"kubernetes|k8s|docker|container",
        "Rayhan can help with:\n\n"
        "• Kubernetes cluster setup and management\n"
        "• Helm charts and package management\n"
        "• Docker containerization strategies\n"
        "• Microservices deployment\n"
        "• Auto-scaling and load balancing\n\n"
        "He's deployed production-grade container orchestration for multiple clients.",
    ),
    _rule(
        "terraform",
        r"terraform|infrastructure.*code|iac",
        "Rayhan uses Infrastructure as Code extensively:\n\n"
        "• Terraform for multi-cloud deployments\n"
        "• Modular and reusable infrastructure code\n"
        "• State management best practices\n"
        "• CI/CD integration for infrastructure\n\n"
        "He can help you implement IaC from scratch or improve existing setups.",
    ),
    _rule(
        "services",
        r"service|offer|help|do",
        "Rayhan offers:\n\n"
        "• Cloud Architecture Design\n"
        "• Infrastructure Migration (on-prem to cloud)\n"
        "• CI/CD Pipeline Implementation\n"
        "• Container Orchestration Setup\n"
        "• Monitoring & Observability Solutions\n"
        "• DevOps Consulting & Training\n\n"
        "All solutions are tailored to your specific needs and scale.",
    ),
    _rule(
        "pricing",
        r"price|cost|rate|fee|charge|budget",
        "Rayhan's rates vary based on project scope and complexity:\n\n"
        "• Hourly consulting: $100-150/hour\n"
        "• Project-based pricing available\n"
        "• Long-term contracts negotiable\n\n"
        "For a detailed quote, please use the contact form or email directly.",
    ),
    _rule(
        "availability",
        r"available|availability|hire|when",
        "Rayhan is currently available for new projects! He typically responds to "
        "inquiries within 24 hours. Use the contact form on this site or reach out "
        "directly to discuss your needs.",
    ),
    _rule(
        "contact",
        r"contact|email|reach|get in touch",
        "You can reach Rayhan through:\n\n"
        "• Contact form on this website (scroll down)\n"
        "• Email: rayhan@example.com\n"
        "• LinkedIn: [link in footer]\n\n"
        "He typically responds within 24 hours.",
    ),
    _rule(
        "projects",
        r"project|portfolio|work|example|case study",
        "Rayhan has worked on:\n\n"
        "• Multi-AZ AWS production environments for high-traffic applications\n"
        "• Kubernetes cluster migrations serving 100k+ users\n"
        "• CI/CD pipelines reducing deployment time by 80%\n"
        "• Infrastructure cost optimization saving clients 40%+\n\n"
        "Scroll down to see detailed case studies!",
    ),
    _rule(
        "experience",
        r"experience|background|years",
        "Rayhan has 5+ years of DevOps experience, working with startups and enterprises. "
        "He's handled infrastructure serving millions of users and has expertise in both "
        "greenfield projects and legacy system modernization.",
    ),
    # Catch-all; must stay last.
    _rule("default", r"", DEFAULT_REPLY),
)


def match_rule(message: str, rules: Sequence[Rule] = RULES) -> Rule:
    """Return the first rule matching the normalized message (linear scan)."""
    msg = normalize(message)
    for rule in rules:
        if rule.matches(msg):
            return rule
    # Only reachable with a custom table lacking a catch-all
    raise LookupError("rule table has no catch-all entry")


def rule_based_reply(message: str, rules: Sequence[Rule] = RULES) -> str:
    return match_rule(message, rules).reply
